"""
Sales Summary Service
Totals shown on the dashboard cards
"""
import logging

from flask import current_app

from components import register_component
from core import BackendError, get_backend_client

logger = logging.getLogger(__name__)


@register_component('sales_summary')
class SalesSummaryService:
    """Service for the Dashboard page"""

    def get_recent_sales(self, limit=None):
        """Fetch the latest sales (raises BackendError)"""
        limit = limit or current_app.config['DASHBOARD_SALES_LIMIT']
        return get_backend_client().list_sales(limit)

    def summarize(self, sales):
        """Summary statistics over the fetched sales

        Missing revenue counts as 0. Empty input gives zeros and no record/date.
        """
        revenues = [float(record.revenue or 0) for record in sales]
        total = sum(revenues)
        count = len(revenues)

        return {
            'count': count,
            'total_revenue': total,
            'average_revenue': total / count if count else 0,
            'max_revenue': max(revenues) if revenues else None,
            'last_update': (sales[0].date or None) if sales else None
        }

    def get_dashboard_data(self):
        """Everything the dashboard needs, with the error string on failure"""
        try:
            sales = self.get_recent_sales()
            error = None
        except BackendError as e:
            logger.warning('Loading dashboard sales failed: %s', e.message)
            sales = []
            error = e.message

        return {
            'sales': sales,
            'recent_sales': sales[:current_app.config['RECENT_SALES_DISPLAY']],
            'summary': self.summarize(sales),
            'error': error
        }
