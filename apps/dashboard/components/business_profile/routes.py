"""
Business Profile routes
"""
from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from core import BackendError, ValidationError
from .service import BusinessProfileService

business_profile_bp = Blueprint(
    'business_profile',
    __name__,
    template_folder='templates'
)

service = BusinessProfileService()


def _render(form, status=200):
    return render_template(
        'profile.html',
        form=form,
        fields=current_app.config['PROFILE_FIELDS'],
        **service.get_profile()
    ), status


@business_profile_bp.route('/profile')
def profile_page():
    return _render({f['key']: '' for f in current_app.config['PROFILE_FIELDS']})


@business_profile_bp.route('/profile', methods=['POST'])
def save_profile():
    """Save profile then reload the page with an empty form"""
    form = {f['key']: request.form.get(f['key'], '') for f in current_app.config['PROFILE_FIELDS']}

    try:
        service.save_profile(form)
    except ValidationError as e:
        flash(e.message, 'error')
        return _render(form, 400)
    except BackendError:
        flash('Gagal menyimpan profil', 'error')
        return _render(form, 502)

    flash('Profil tersimpan', 'success')
    return redirect(url_for('business_profile.profile_page'))


def init_business_profile(app):
    """Initialize business profile component with Flask app"""
    app.register_blueprint(business_profile_bp)
    return business_profile_bp
