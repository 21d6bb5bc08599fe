from unittest.mock import Mock

import pytest

from core import BackendClient, SalesRecord
from dashboard_app import create_app


@pytest.fixture()
def app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'RATELIMIT_ENABLED': False,
        'BACKEND_URL': 'http://backend.test/',
    })
    return app


@pytest.fixture()
def backend(app):
    """Replace the shared backend client with a mock"""
    mock = Mock(spec=BackendClient)
    mock.list_sales.return_value = []
    mock.list_profiles.return_value = []
    app.extensions['backend_client'] = mock
    return mock


@pytest.fixture()
def client(app, backend):
    return app.test_client()


@pytest.fixture()
def sample_sales():
    return [
        SalesRecord(date='2024-05-04', revenue=100000, note='hujan', id='d'),
        SalesRecord(date='2024-05-03', revenue=250000, note='', id='c'),
        SalesRecord(date='2024-05-02', revenue=0, note='tutup', id='b'),
        SalesRecord(date='2024-05-01', revenue=150000, note='', id='a'),
    ]
