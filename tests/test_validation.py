import pytest

from config.settings import DashboardConfig
from core import ValidationError
from core.validation import (
    validate_forecast_params,
    validate_profile_form,
    validate_sales_form,
    validate_series_text,
)


@pytest.fixture(autouse=True)
def app_context(app):
    with app.app_context():
        yield


def test_forecast_params_defaults():
    assert validate_forecast_params(None, None) == ('sma', 3, None)
    assert validate_forecast_params('', '') == ('sma', 3, None)


def test_forecast_params_normalizes():
    assert validate_forecast_params(' EMA ', '5', '0.3') == ('ema', 5, 0.3)
    assert validate_forecast_params('sma', 4.0, '') == ('sma', 4, None)


@pytest.mark.parametrize('method, window, alpha, field', [
    ('wma', 3, None, 'method'),
    ('sma', 0, None, 'window'),
    ('sma', '2.5', None, 'window'),
    ('sma', 'tiga', None, 'window'),
    ('ema', 3, 'x', 'alpha'),
])
def test_forecast_params_rejects(method, window, alpha, field):
    with pytest.raises(ValidationError) as excinfo:
        validate_forecast_params(method, window, alpha)
    assert excinfo.value.field == field


def test_series_needs_two_numbers():
    assert validate_series_text('1, 2') == [1.0, 2.0]
    with pytest.raises(ValidationError) as excinfo:
        validate_series_text('5')
    assert excinfo.value.message == 'Masukkan minimal 2 angka'


def test_sales_form_requires_date_and_revenue():
    with pytest.raises(ValidationError) as excinfo:
        validate_sales_form('', '1000')
    assert excinfo.value.message == 'Isi tanggal dan pemasukan'
    with pytest.raises(ValidationError):
        validate_sales_form('2024-05-01', '  ')


def test_sales_form_parses_revenue():
    assert validate_sales_form('2024-05-01', '150000', ' ramai ') == ('2024-05-01', 150000.0, 'ramai')
    assert validate_sales_form('2024-05-01', '0', None) == ('2024-05-01', 0.0, '')
    with pytest.raises(ValidationError) as excinfo:
        validate_sales_form('2024-05-01', 'banyak')
    assert excinfo.value.field == 'revenue'


def test_profile_form_required_fields():
    fields = DashboardConfig.PROFILE_FIELDS
    values = validate_profile_form({'business_name': ' Warung Sari ', 'owner_name': 'Sari'}, fields)
    assert values['business_name'] == 'Warung Sari'
    assert values['email'] == ''
    assert set(values) == {f['key'] for f in fields}

    with pytest.raises(ValidationError) as excinfo:
        validate_profile_form({'business_name': 'Warung Sari'}, fields)
    assert excinfo.value.message == 'Nama Pemilik wajib diisi'

    with pytest.raises(ValidationError) as excinfo:
        validate_profile_form({}, fields)
    assert excinfo.value.message == 'Nama Usaha dan Nama Pemilik wajib diisi'
