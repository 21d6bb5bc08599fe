"""
Main routes for dashboard
"""
from .main_routes import main_bp

__all__ = ['main_bp']
