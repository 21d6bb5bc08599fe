"""
Dashboard configuration settings
"""
import os


def _backend_url():
    url = os.environ.get('BACKEND_URL') or os.environ.get('VITE_BACKEND_URL') or 'http://localhost:8000'
    return url.rstrip('/')


class DashboardConfig:
    """Centralized configuration for dashboard"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Backend service
    BACKEND_URL = _backend_url()
    BACKEND_TIMEOUT = float(os.environ.get('BACKEND_TIMEOUT', 10))

    # Server
    HOST = os.environ.get('DASHBOARD_HOST', '0.0.0.0')
    PORT = int(os.environ.get('DASHBOARD_PORT', 5173))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # How many sales records each page asks for
    DASHBOARD_SALES_LIMIT = 20
    REPORT_SALES_LIMIT = 200
    RECENT_SALES_DISPLAY = 8

    # Forecast settings
    FORECAST_METHODS = {
        'sma': 'SMA',
        'ema': 'EMA',
    }
    DEFAULT_FORECAST_METHOD = 'sma'
    DEFAULT_FORECAST_WINDOW = 3

    # Navigation, in display order
    NAV_ITEMS = [
        {'endpoint': 'sales_summary.dashboard', 'path': '/dashboard', 'label': 'Dashboard'},
        {'endpoint': 'forecast.predict_page', 'path': '/predict', 'label': 'Predict'},
        {'endpoint': 'monitor_report.reports_page', 'path': '/reports', 'label': 'Monitor Report'},
        {'endpoint': 'business_profile.profile_page', 'path': '/profile', 'label': 'Profil'},
    ]

    PROFILE_FIELDS = [
        {'key': 'business_name', 'label': 'Nama Usaha', 'required': True},
        {'key': 'owner_name', 'label': 'Nama Pemilik', 'required': True},
        {'key': 'email', 'label': 'Email'},
        {'key': 'phone', 'label': 'Telepon'},
        {'key': 'address', 'label': 'Alamat', 'wide': True},
        {'key': 'category', 'label': 'Kategori'},
        {'key': 'description', 'label': 'Deskripsi', 'wide': True, 'textarea': True},
    ]
