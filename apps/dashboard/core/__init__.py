"""
Core services for dashboard components
"""
from flask import current_app

from .backend_client import BackendClient
from .errors import BackendError, ValidationError
from .formatting import rupiah, parse_series, parse_number
from .models import SalesRecord, BusinessProfile, PredictionResult


def init_backend_client(app):
    """Create the shared backend client from app config"""
    client = BackendClient(
        app.config['BACKEND_URL'],
        timeout=app.config.get('BACKEND_TIMEOUT', 10)
    )
    app.extensions['backend_client'] = client
    return client


def get_backend_client():
    """Backend client of the running app"""
    return current_app.extensions['backend_client']


__all__ = [
    'BackendClient',
    'BackendError',
    'ValidationError',
    'SalesRecord',
    'BusinessProfile',
    'PredictionResult',
    'rupiah',
    'parse_series',
    'parse_number',
    'init_backend_client',
    'get_backend_client'
]
