"""
Dashboard page routes
"""
from flask import Blueprint, jsonify, render_template, request

from components.quick_predict.service import QuickPredictService
from core import BackendError
from .service import SalesSummaryService

# Create blueprint for the dashboard page
sales_summary_bp = Blueprint(
    'sales_summary',
    __name__,
    template_folder='templates'
)

# Initialize services
service = SalesSummaryService()
quick_predict = QuickPredictService()


@sales_summary_bp.route('/')
@sales_summary_bp.route('/dashboard')
def dashboard():
    """Dashboard page: summary cards, latest sales and quick predict

    Changing method or window reloads the page, which issues a new prediction.
    """
    data = service.get_dashboard_data()
    prediction = quick_predict.run(
        data['sales'],
        method=request.args.get('method'),
        window=request.args.get('window')
    )

    return render_template('dashboard.html', prediction=prediction, **data)


@sales_summary_bp.route('/api/dashboard/summary')
def api_dashboard_summary():
    """Summary statistics as JSON"""
    limit = request.args.get('limit', type=int)
    # Non-positive limits fall back to the configured default
    if limit is not None and limit < 1:
        limit = None

    try:
        sales = service.get_recent_sales(limit)
    except BackendError as e:
        return jsonify(e.to_dict()), 502

    return jsonify(service.summarize(sales))


def init_sales_summary(app):
    """Initialize dashboard page component with Flask app"""
    app.register_blueprint(sales_summary_bp)
    return sales_summary_bp
