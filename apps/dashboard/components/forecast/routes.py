"""
Predict page routes
"""
from flask import Blueprint, current_app, flash, jsonify, render_template, request

from core import BackendError, ValidationError
from core.validation import validate_forecast_params
from .service import ForecastService

forecast_bp = Blueprint(
    'forecast',
    __name__,
    template_folder='templates'
)

service = ForecastService()


def _default_form():
    return {
        'numbers': '',
        'method': current_app.config['DEFAULT_FORECAST_METHOD'],
        'window': current_app.config['DEFAULT_FORECAST_WINDOW'],
        'alpha': ''
    }


@forecast_bp.route('/predict', methods=['GET', 'POST'])
def predict_page():
    """Predict page; POST keeps the form values and shows the result below"""
    form = _default_form()
    result = None

    if request.method == 'POST':
        form.update({key: request.form.get(key, '') for key in form})
        try:
            result = service.predict_from_form(
                form['numbers'], form['method'], form['window'], form['alpha']
            )
        except ValidationError as e:
            flash(e.message, 'error')
        except BackendError as e:
            flash(e.message, 'error')

    return render_template('predict.html', form=form, result=result)


@forecast_bp.route('/api/dashboard/predict', methods=['POST'])
def api_predict():
    """JSON forecast: {series, method, window, alpha?}"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'No data received'}), 400

    series = data.get('series')
    if not isinstance(series, list):
        return jsonify({'error': 'series harus berupa daftar angka'}), 400
    try:
        series = [float(x) for x in series]
    except (TypeError, ValueError):
        return jsonify({'error': 'series harus berupa daftar angka'}), 400
    if len(series) < 2:
        return jsonify({'error': 'Masukkan minimal 2 angka'}), 400

    try:
        method, window, alpha = validate_forecast_params(
            data.get('method'), data.get('window'), data.get('alpha')
        )
        result = service.predict(series, method, window, alpha)
    except ValidationError as e:
        return jsonify({'error': e.message, 'field': e.field}), 400
    except BackendError as e:
        return jsonify(e.to_dict()), 502

    return jsonify(result.to_dict())


def init_forecast(app):
    """Initialize predict page component with Flask app"""
    app.register_blueprint(forecast_bp)
    return forecast_bp
