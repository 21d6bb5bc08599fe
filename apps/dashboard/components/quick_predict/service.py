"""
Quick Predict Service
Forecasts the next day from the sales already shown on the dashboard
"""
import logging

from flask import current_app

from components import register_component
from core import BackendError, ValidationError, get_backend_client
from core.validation import validate_forecast_params

logger = logging.getLogger(__name__)


@register_component('quick_predict')
class QuickPredictService:
    """Service for Quick Predict card"""

    def build_series(self, sales):
        """Revenue values of the listed sales, missing revenue counts as 0"""
        return [float(record.revenue or 0) for record in sales]

    def new_state(self, method=None, window=None, has_data=False):
        config = current_app.config
        return {
            'method': method or config['DEFAULT_FORECAST_METHOD'],
            'window': window if window not in (None, '') else config['DEFAULT_FORECAST_WINDOW'],
            'result': None,
            'error': None,
            'error_kind': None,
            'has_data': has_data
        }

    def run(self, sales, method=None, window=None):
        """Issue one prediction for the given sales

        Returns a dict for the template: method/window selected, result or error.
        No request is made when there are no sales or the params are invalid.
        """
        state = self.new_state(method, window, has_data=bool(sales))

        try:
            method, window, _ = validate_forecast_params(method, window)
        except ValidationError as e:
            state['error'] = e.message
            state['error_kind'] = 'validation'
            return state

        state['method'] = method
        state['window'] = window

        series = self.build_series(sales)
        if not series:
            return state

        try:
            state['result'] = get_backend_client().predict(series, method, window)
        except BackendError as e:
            logger.warning('Quick predict failed: %s', e.message)
            state['error'] = e.message
            state['error_kind'] = 'backend'

        return state

    def run_latest(self, method=None, window=None):
        """Predict from the latest dashboard sales

        Params are checked before the sales fetch, which raises BackendError.
        """
        try:
            validate_forecast_params(method, window)
        except ValidationError as e:
            state = self.new_state(method, window)
            state['error'] = e.message
            state['error_kind'] = 'validation'
            return state

        sales = get_backend_client().list_sales(current_app.config['DASHBOARD_SALES_LIMIT'])
        return self.run(sales, method=method, window=window)
