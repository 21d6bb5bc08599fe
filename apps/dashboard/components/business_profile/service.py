"""
Business Profile Service
"""
import logging

from flask import current_app

from components import register_component
from core import BackendError, get_backend_client
from core.validation import validate_profile_form

logger = logging.getLogger(__name__)


@register_component('business_profile')
class BusinessProfileService:
    """Service for the Profile page"""

    def get_profile(self):
        """First profile returned by the backend, or None"""
        try:
            profiles = get_backend_client().list_profiles()
        except BackendError as e:
            logger.warning('Loading profile failed: %s', e.message)
            return {'profile': None, 'error': e.message}

        return {'profile': profiles[0] if profiles else None, 'error': None}

    def save_profile(self, form):
        """Validate and POST a new profile (ValidationError / BackendError)"""
        fields = validate_profile_form(form, current_app.config['PROFILE_FIELDS'])
        created = get_backend_client().create_profile(fields)
        logger.info('Saved profile for %s', fields['business_name'])
        return created
