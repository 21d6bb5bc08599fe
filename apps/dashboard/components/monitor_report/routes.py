"""
Monitor Report routes
"""
from flask import Blueprint, flash, redirect, render_template, request, url_for

from core import BackendError, ValidationError
from .service import MonitorReportService

monitor_report_bp = Blueprint(
    'monitor_report',
    __name__,
    template_folder='templates'
)

service = MonitorReportService()


@monitor_report_bp.route('/reports')
def reports_page():
    """Sales table with the add form"""
    form = {'date': '', 'revenue': '', 'note': ''}
    return render_template('reports.html', form=form, **service.get_report())


@monitor_report_bp.route('/reports', methods=['POST'])
def add_sale():
    """Add one sales record, then reload the list

    On failure the form is shown again with what the user typed.
    """
    form = {key: request.form.get(key, '') for key in ('date', 'revenue', 'note')}

    try:
        service.add_sale(form['date'], form['revenue'], form['note'])
    except ValidationError as e:
        flash(e.message, 'error')
        return render_template('reports.html', form=form, **service.get_report()), 400
    except BackendError:
        flash('Gagal menambah data', 'error')
        return render_template('reports.html', form=form, **service.get_report()), 502

    flash('Data penjualan ditambahkan', 'success')
    return redirect(url_for('monitor_report.reports_page'))


def init_monitor_report(app):
    """Initialize monitor report component with Flask app"""
    app.register_blueprint(monitor_report_bp)
    return monitor_report_bp
