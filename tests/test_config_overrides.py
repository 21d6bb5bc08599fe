from unittest.mock import Mock

import pytest

from core import BackendClient, PredictionResult, SalesRecord
from dashboard_app import create_app


@pytest.fixture()
def tuned_app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test',
        'RATELIMIT_ENABLED': False,
        'DASHBOARD_SALES_LIMIT': 5,
        'REPORT_SALES_LIMIT': 7,
        'RECENT_SALES_DISPLAY': 2,
        'DEFAULT_FORECAST_METHOD': 'ema',
        'DEFAULT_FORECAST_WINDOW': 5,
        'FORECAST_METHODS': {'sma': 'SMA'},
        'PROFILE_FIELDS': [
            {'key': 'business_name', 'label': 'Nama Usaha', 'required': True},
            {'key': 'owner_name', 'label': 'Nama Pemilik'},
        ],
    })
    mock = Mock(spec=BackendClient)
    mock.list_sales.return_value = [
        SalesRecord(date='2024-05-0%d' % day, revenue=1000 * day) for day in (3, 2, 1)
    ]
    mock.list_profiles.return_value = []
    mock.predict.return_value = PredictionResult(predicted=2000.0, method='ema', window=5)
    app.extensions['backend_client'] = mock
    return app, mock


def test_sales_limits_follow_overrides(tuned_app):
    app, backend = tuned_app
    client = app.test_client()

    client.get('/reports')
    body = client.get('/dashboard?method=sma').get_data(as_text=True)

    assert [c.args[0] for c in backend.list_sales.call_args_list] == [7, 5]
    assert body.count('<li class="py-2 flex items-center justify-between">') == 2


def test_forecast_defaults_follow_overrides(tuned_app):
    app, backend = tuned_app
    client = app.test_client()

    body = client.get('/dashboard').get_data(as_text=True)

    # ema is the default but no longer an allowed method
    backend.predict.assert_not_called()
    assert 'Metode tidak dikenal: ema' in body

    client.get('/dashboard?method=sma')
    backend.predict.assert_called_once_with([3000.0, 2000.0, 1000.0], 'sma', 5)

    form = client.get('/predict').get_data(as_text=True)
    assert 'value="5"' in form
    assert '<option value="ema"' not in form


def test_profile_fields_follow_overrides(tuned_app):
    app, backend = tuned_app
    client = app.test_client()

    response = client.post('/profile', data={'business_name': 'Warung Sari', 'email': 'x@example.com'})

    assert response.status_code == 302
    backend.create_profile.assert_called_once_with({'business_name': 'Warung Sari', 'owner_name': ''})
