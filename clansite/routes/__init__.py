"""
Clan Site - Routes
"""
from .api import api_bp
from .auth import auth_bp
from .admin import admin_bp
from .public import public_bp

__all__ = [
    'api_bp',
    'auth_bp',
    'admin_bp',
    'public_bp',
]
