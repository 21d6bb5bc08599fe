"""
Sales Summary Component
Dashboard page with revenue totals and the latest sales
"""

from .routes import sales_summary_bp, init_sales_summary
from .service import SalesSummaryService

__all__ = ['sales_summary_bp', 'init_sales_summary', 'SalesSummaryService']
