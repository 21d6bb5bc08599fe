"""
Backend Status Routes
"""
from flask import Blueprint, jsonify

from .service import BackendStatusService

backend_status_bp = Blueprint('backend_status', __name__, url_prefix='/api/backend')

service = BackendStatusService()


@backend_status_bp.route('/health')
def api_backend_health():
    """Check backend health; 503 when it cannot be reached"""
    result = service.get_health()
    return jsonify(result), 200 if result['healthy'] else 503


@backend_status_bp.route('/metrics')
def api_backend_metrics():
    """Request/error counters per backend endpoint"""
    return jsonify(service.get_metrics())


def init_backend_status(app):
    """Initialize backend status component with Flask app"""
    app.register_blueprint(backend_status_bp)
    return backend_status_bp
