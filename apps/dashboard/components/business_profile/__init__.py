"""
Business Profile Component
Shows and records the UMKM profile
"""

from .routes import business_profile_bp, init_business_profile
from .service import BusinessProfileService

__all__ = ['business_profile_bp', 'init_business_profile', 'BusinessProfileService']
