"""
UMKM Predict Dashboard
Flask application for recording daily sales, summary statistics and
SMA/EMA forecasts from the backend service
"""
import os
import sys
import logging

# Add current directory to path for imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from config.settings import DashboardConfig
from core import init_backend_client
from components import registry
from routes.main_routes import main_bp

# Page components
from components.sales_summary import init_sales_summary
from components.quick_predict import init_quick_predict
from components.forecast import init_forecast
from components.monitor_report import init_monitor_report
from components.business_profile import init_business_profile
from components.backend_status import init_backend_status

logger = logging.getLogger(__name__)


class DashboardApp:
    """Main dashboard application class"""

    def __init__(self):
        self.app = None
        self.backend = None

    def create_app(self, config_overrides=None):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(DashboardConfig)
        if config_overrides:
            self.app.config.update(config_overrides)
        self.app.config['BACKEND_URL'] = self.app.config['BACKEND_URL'].rstrip('/')

        logging.basicConfig(
            level=self.app.config.get('LOG_LEVEL', 'INFO'),
            format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
        )

        # Initialize extensions
        # No CSRF protection, the dashboard has no login
        Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )

        # Shared backend client
        self.backend = init_backend_client(self.app)

        # Navigation shell, filters and error pages
        self.app.register_blueprint(main_bp)

        # Initialize components
        init_sales_summary(self.app)
        init_quick_predict(self.app)
        init_forecast(self.app)
        init_monitor_report(self.app)
        init_business_profile(self.app)
        init_backend_status(self.app)

        logger.debug('Components loaded: %s', ', '.join(registry.describe()))
        return self.app

    def run(self):
        """Start the dashboard application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        logger.info("=" * 60)
        logger.info("UMKM Predict Dashboard")
        logger.info("Starting on: http://localhost:%s", port)
        logger.info("Backend:     %s", self.app.config['BACKEND_URL'])
        logger.info("Pages: /dashboard /predict /reports /profile")
        logger.info("=" * 60)

        health = self.backend.check_health()
        if not health['healthy']:
            logger.warning('Backend not reachable at %s: %s', health['url'], health.get('error') or health.get('status_code'))

        self.app.run(host=host, port=port, debug=False)


def create_app(config_overrides=None):
    """Application factory"""
    return DashboardApp().create_app(config_overrides)


def main():
    """Main entry point"""
    dashboard = DashboardApp()
    dashboard.create_app()
    dashboard.run()


if __name__ == '__main__':
    main()
