"""
Quick Predict Component
Forecast card embedded in the dashboard page
"""

from .routes import quick_predict_bp, init_quick_predict
from .service import QuickPredictService

__all__ = ['quick_predict_bp', 'init_quick_predict', 'QuickPredictService']
