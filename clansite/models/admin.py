"""
Clan Site - Admin Credential Model
"""
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from ..extensions import db


class AdminCredential(UserMixin, db.Model):
    """The single admin account allowed into the dashboard."""
    __tablename__ = 'admin'

    username = db.Column(db.String(100), primary_key=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Checked against when the username is unknown, so both failure
    # paths run one hash verification.
    _dummy_hash = None

    def set_password(self, password):
        """Hash and set the password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check if the provided password matches."""
        return check_password_hash(self.password_hash, password or '')

    @classmethod
    def verify(cls, username, password):
        """Return the admin when username and password match, else None."""
        admin = db.session.get(cls, username) if username else None
        if admin is None:
            if cls._dummy_hash is None:
                cls._dummy_hash = generate_password_hash('not-a-real-password')
            check_password_hash(cls._dummy_hash, password or '')
            return None
        return admin if admin.check_password(password) else None

    @classmethod
    def seed(cls, username, password):
        """Create the admin row if absent. Returns True when a row was added."""
        if db.session.get(cls, username) is not None:
            return False
        admin = cls(username=username)
        admin.set_password(password)
        db.session.add(admin)
        db.session.commit()
        return True

    def get_id(self):
        """Flask-Login id."""
        return self.username

    def __repr__(self):
        return f'<AdminCredential {self.username}>'
