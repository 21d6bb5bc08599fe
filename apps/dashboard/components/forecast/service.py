"""
Forecast Service
Manual forecast from a series typed by the user
"""
import logging

from components import register_component
from core import get_backend_client
from core.validation import validate_forecast_params, validate_series_text

logger = logging.getLogger(__name__)


@register_component('forecast')
class ForecastService:
    """Service for the Predict page"""

    def predict_from_form(self, numbers, method, window, alpha=None):
        """Validate the form and request one prediction

        Raises ValidationError before any request is made, BackendError on
        request failure.
        """
        series = validate_series_text(numbers)
        method, window, alpha = validate_forecast_params(method, window, alpha)
        return self.predict(series, method, window, alpha)

    def predict(self, series, method, window, alpha=None):
        logger.info('Predicting next value from %d points (%s, window=%d)', len(series), method, window)
        return get_backend_client().predict(series, method, window, alpha=alpha)
