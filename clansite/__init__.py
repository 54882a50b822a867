"""
Clan Site - Flask Application Factory

The quiz-open switch defaults to one persisted flag shared by every session
(QUIZ_FLAG_SCOPE='global'). Set QUIZ_FLAG_SCOPE='session' to keep the older
behaviour, where each browser session holds its own copy and only the admin
who opened the quiz can submit to it.
"""
from flask import Flask, jsonify
from .config import config
from .extensions import db, login_manager, migrate, limiter
from .errors import ClanSiteError

# Columns added after the first release; create_all() does not add
# columns to tables that already exist.
LEGACY_COLUMNS = {
    'bookings': [
        ('status', "VARCHAR(20) DEFAULT 'new'"),
        ('notes', 'TEXT'),
    ],
}


def create_app(config_name='default', test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    if test_config:
        app.config.update(test_config)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    # Admin session loader
    @login_manager.user_loader
    def load_user(user_id):
        """Load the admin by username."""
        from .models import AdminCredential
        return db.session.get(AdminCredential, user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        from .utils.decorators import unauthenticated_response
        return unauthenticated_response()

    # Services (file store, email, quiz gate, submissions, admin, results)
    from .services import init_services
    init_services(app)

    # Register blueprints
    from .routes.api import api_bp
    from .routes.auth import auth_bp
    from .routes.admin import admin_bp
    from .routes.public import public_bp

    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/admin')
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(public_bp)

    # Register error handlers
    register_error_handlers(app)

    # Create database tables and seed the admin account.
    # Any failure here aborts startup.
    with app.app_context():
        try:
            db.create_all()
            migrate_legacy_columns()
            from .models import AdminCredential
            if AdminCredential.seed(app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD']):
                app.logger.info(f"Seeded admin account '{app.config['ADMIN_USERNAME']}'")
        except Exception as e:
            app.logger.critical(f"Database initialisation failed: {e}", exc_info=True)
            raise

    return app


def migrate_legacy_columns():
    """Add missing columns to tables created by older releases."""
    from sqlalchemy import inspect, text

    inspector = inspect(db.engine)
    tables = inspector.get_table_names()
    for table, required_columns in LEGACY_COLUMNS.items():
        if table not in tables:
            continue
        columns = [col['name'] for col in inspector.get_columns(table)]
        for col_name, col_type in required_columns:
            if col_name not in columns:
                db.session.execute(text(f"ALTER TABLE {table} ADD COLUMN {col_name} {col_type}"))
                db.session.commit()


def register_error_handlers(app):
    """Every error leaves as JSON: {success: false, message}."""

    @app.errorhandler(ClanSiteError)
    def service_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'success': False, 'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def too_large(e):
        return jsonify({'success': False, 'message': 'The uploaded file is too large'}), 413

    @app.errorhandler(429)
    def ratelimit_handler(e):
        """Handle rate limit exceeded."""
        return jsonify({
            'success': False,
            'error': 'Rate limit exceeded',
            'message': 'Too many requests, please try again later'
        }), 429

    @app.errorhandler(500)
    def internal_error(e):
        db.session.rollback()
        return jsonify({'success': False, 'message': 'An unexpected error occurred'}), 500
