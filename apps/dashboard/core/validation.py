"""
Form validation shared by the forecast and report pages
Raises ValidationError so no backend request is made on bad input
"""
from flask import current_app

from .errors import ValidationError
from .formatting import parse_number, parse_series


def validate_forecast_params(method, window, alpha=None):
    """Normalize method/window/alpha from form or query values

    Returns (method, window, alpha) with alpha None when left blank.
    """
    config = current_app.config
    method = (method or config['DEFAULT_FORECAST_METHOD']).strip().lower()
    if method not in config['FORECAST_METHODS']:
        raise ValidationError(f'Metode tidak dikenal: {method}', field='method')

    if window is None or str(window).strip() == '':
        window = config['DEFAULT_FORECAST_WINDOW']
    window_number = parse_number(window)
    if window_number is None or window_number != int(window_number) or window_number < 1:
        raise ValidationError('Window harus bilangan bulat minimal 1', field='window')

    alpha_number = None
    if alpha is not None and str(alpha).strip() != '':
        alpha_number = parse_number(alpha)
        if alpha_number is None:
            raise ValidationError('Alpha harus berupa angka', field='alpha')

    return method, int(window_number), alpha_number


def validate_series_text(text, minimum=2):
    series = parse_series(text)
    if len(series) < minimum:
        raise ValidationError(f'Masukkan minimal {minimum} angka', field='numbers')
    return series


def validate_sales_form(date, revenue, note=''):
    """Returns (date, revenue, note) ready for POST /api/sales"""
    date = (date or '').strip()
    revenue_text = '' if revenue is None else str(revenue).strip()
    if not date or not revenue_text:
        raise ValidationError('Isi tanggal dan pemasukan')

    revenue_number = parse_number(revenue_text)
    if revenue_number is None:
        raise ValidationError('Pemasukan harus berupa angka', field='revenue')

    return date, revenue_number, (note or '').strip()


def validate_profile_form(form, fields):
    """Collect profile fields from a form, checking the required ones"""
    values = {f['key']: (form.get(f['key']) or '').strip() for f in fields}
    missing = [f['label'] for f in fields if f.get('required') and not values[f['key']]]
    if missing:
        raise ValidationError(f'{" dan ".join(missing)} wajib diisi')
    return values
