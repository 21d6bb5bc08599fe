"""
Quick Predict Routes
The card itself is rendered by the dashboard page, this exposes it as JSON
"""
from flask import Blueprint, jsonify, request

from core import BackendError
from .service import QuickPredictService

quick_predict_bp = Blueprint(
    'quick_predict',
    __name__,
    template_folder='templates',
    url_prefix='/api/dashboard'
)

service = QuickPredictService()


@quick_predict_bp.route('/quick-predict')
def api_quick_predict():
    """Forecast from the latest sales with ?method=&window="""
    try:
        state = service.run_latest(
            method=request.args.get('method'),
            window=request.args.get('window')
        )
    except BackendError as e:
        return jsonify(e.to_dict()), 502

    if state['error_kind'] == 'validation':
        return jsonify({'error': state['error']}), 400
    if state['error_kind'] == 'backend':
        return jsonify({'error': state['error']}), 502
    if state['result'] is None:
        return jsonify({'error': 'Butuh data penjualan untuk memprediksi.'}), 404

    return jsonify(state['result'].to_dict())


def init_quick_predict(app):
    """Initialize quick predict component with Flask app"""
    app.register_blueprint(quick_predict_bp)
    return quick_predict_bp
