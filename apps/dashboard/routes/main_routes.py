"""
Navigation shell for dashboard pages
Shared layout, navbar state and the not-found page
"""
import logging

from flask import Blueprint, current_app, render_template, request

from core import rupiah

logger = logging.getLogger(__name__)

# Create main blueprint; holds the shared layout templates
main_bp = Blueprint('main', __name__, template_folder='templates')


def nav_items(current_path):
    """Navbar entries with the active one marked"""
    # "/" shows the dashboard, so highlight it there too
    if current_path == '/':
        current_path = '/dashboard'
    return [dict(item, active=item['path'] == current_path) for item in current_app.config['NAV_ITEMS']]


def method_label(method):
    """Display label for a forecast method"""
    return current_app.config['FORECAST_METHODS'].get(method, str(method).upper())


@main_bp.app_context_processor
def inject_navigation():
    return {
        'nav_items': nav_items(request.path),
        'app_title': 'UMKM Predict',
        'method_label': method_label
    }


@main_bp.app_template_filter('rupiah')
def jinja_rupiah(value):
    return rupiah(value)


@main_bp.app_errorhandler(404)
def page_not_found(error):
    logger.info('Page not found: %s', request.path)
    return render_template('not_found.html'), 404
