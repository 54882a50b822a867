"""
Clan Site - Site Settings (persisted key/value switches)
"""
from datetime import datetime
from ..extensions import db


class SiteSetting(db.Model):
    """Process-wide settings that must survive restarts."""
    __tablename__ = 'site_settings'

    KEY_QUIZ_OPEN = 'quiz_open'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False, index=True)
    value = db.Column(db.String(255), nullable=False)
    value_type = db.Column(db.String(20), default='string')  # string, int, bool
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Default values
    DEFAULTS = {
        KEY_QUIZ_OPEN: ('false', 'bool'),
    }

    @classmethod
    def get(cls, key, default=None):
        """Get a typed setting value."""
        setting = cls.query.filter_by(key=key).first()
        if setting:
            return setting.typed_value

        if key in cls.DEFAULTS:
            val, val_type = cls.DEFAULTS[key]
            return cls._convert_value(val, val_type)

        return default

    @classmethod
    def set(cls, key, value):
        """Store a setting value. The caller commits."""
        if isinstance(value, bool):
            value = 'true' if value else 'false'

        setting = cls.query.filter_by(key=key).first()
        if not setting:
            val_type = cls.DEFAULTS[key][1] if key in cls.DEFAULTS else 'string'
            setting = cls(key=key, value=str(value), value_type=val_type)
            db.session.add(setting)
        else:
            setting.value = str(value)

        return setting

    @property
    def typed_value(self):
        return self._convert_value(self.value, self.value_type)

    @staticmethod
    def _convert_value(value, value_type):
        if value_type == 'bool':
            return str(value).lower() in ('true', '1', 'yes', 'on')
        if value_type == 'int':
            return int(value)
        return value

    def __repr__(self):
        return f'<SiteSetting {self.key}={self.value}>'
