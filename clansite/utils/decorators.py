"""
Clan Site - Auth Decorators
"""
from functools import wraps
from flask import jsonify
from flask_login import current_user
from ..extensions import login_manager


def unauthenticated_response():
    """API callers get a 401 payload, never a redirect to a login page."""
    return jsonify({'loggedIn': False}), 401


def admin_required(f):
    """Decorator to require an authenticated admin session."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        return f(*args, **kwargs)
    return decorated_function
