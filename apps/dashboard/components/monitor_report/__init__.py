"""
Monitor Report Component
"""

from .routes import monitor_report_bp, init_monitor_report
from .service import MonitorReportService

__all__ = ['monitor_report_bp', 'init_monitor_report', 'MonitorReportService']
