"""
Backend Status Component
Reachability and request counters of the backend service
"""

from .routes import backend_status_bp, init_backend_status
from .service import BackendStatusService

__all__ = ['backend_status_bp', 'init_backend_status', 'BackendStatusService']
