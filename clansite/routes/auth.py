"""
Clan Site - Admin Authentication Routes
"""
from flask import Blueprint, jsonify, session
from flask_login import login_user, logout_user, current_user
from ..extensions import limiter
from ..services import get_services
from ..utils.helpers import get_payload

auth_bp = Blueprint('auth', __name__)

INVALID_CREDENTIALS = 'Invalid username or password'


@auth_bp.route('/login', methods=['POST'])
@limiter.limit("5 per minute", methods=["POST"])
def login():
    """Establish an admin session."""
    data = get_payload()
    services = get_services()

    admin = services.admin.authenticate(data.get('username'), data.get('password'))
    if admin is None:
        return jsonify({'success': False, 'message': INVALID_CREDENTIALS})

    login_user(admin)
    session.permanent = True
    services.quiz_gate.init_session()

    return jsonify({'success': True})


@auth_bp.route('/check-session', methods=['GET'])
def check_session():
    """Whether this browser holds an admin session."""
    return jsonify({'loggedIn': bool(current_user.is_authenticated)})


@auth_bp.route('/logout', methods=['GET'])
def logout():
    """Tear down the session."""
    logout_user()
    session.clear()
    return jsonify({'success': True})
