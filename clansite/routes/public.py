"""
Clan Site - Public file and health routes
"""
from flask import Blueprint, current_app, jsonify, send_from_directory
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..services import get_services

public_bp = Blueprint('public', __name__)


@public_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve uploaded result files."""
    return send_from_directory(get_services().file_store.upload_dir, filename)


@public_bp.route('/health')
def health_check():
    """Liveness probe with a database round trip."""
    try:
        db.session.execute(text('SELECT 1'))
        database = 'ok'
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Health check database error: {e}")
        database = 'error'

    if database != 'ok':
        return jsonify({'status': 'degraded', 'database': database}), 503
    return jsonify({'status': 'ok', 'database': database})
