"""
Monitor Report Service
"""
import logging

from flask import current_app

from components import register_component
from core import BackendError, get_backend_client
from core.validation import validate_sales_form

logger = logging.getLogger(__name__)


@register_component('monitor_report')
class MonitorReportService:
    """Service for the Monitor Report page: sales table and add form"""

    def get_report(self, limit=None):
        """Sales rows for the table, with the error string on failure"""
        limit = limit or current_app.config['REPORT_SALES_LIMIT']
        try:
            return {'rows': get_backend_client().list_sales(limit), 'error': None}
        except BackendError as e:
            logger.warning('Loading report failed: %s', e.message)
            return {'rows': [], 'error': e.message}

    def add_sale(self, date, revenue, note=''):
        """Validate then POST a sales record

        Raises ValidationError (no request made) or BackendError.
        """
        date, revenue, note = validate_sales_form(date, revenue, note)
        created = get_backend_client().create_sale(date, revenue, note)
        logger.info('Added sales record for %s', date)
        return created
