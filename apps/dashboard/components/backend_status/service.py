"""
Backend Status Service
"""
from datetime import datetime

from components import register_component, registry
from core import get_backend_client


@register_component('backend_status')
class BackendStatusService:
    """Service for backend health and request metrics"""

    def get_health(self):
        """Direct health check against the backend base URL"""
        result = get_backend_client().check_health()
        result['last_health_check'] = datetime.now().isoformat()
        return result

    def get_metrics(self):
        metrics = get_backend_client().get_metrics()
        metrics['components'] = registry.describe()
        return metrics
