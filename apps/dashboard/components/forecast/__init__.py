"""
Forecast Component
Predict page: SMA/EMA forecast from a typed series
"""

from .routes import forecast_bp, init_forecast
from .service import ForecastService

__all__ = ['forecast_bp', 'init_forecast', 'ForecastService']
