"""
Clan Site - Booking Model (join requests)
"""
import uuid
from datetime import datetime
from ..extensions import db


def generate_id():
    """Opaque unique row id."""
    return str(uuid.uuid4())


def isoformat(value):
    return value.isoformat() if value else None


class Booking(db.Model):
    """Join/application request submitted by a visitor."""
    __tablename__ = 'bookings'

    # Statuses
    STATUS_NEW = 'new'
    STATUS_ACCEPTED = 'accepted'
    STATUS_REJECTED = 'rejected'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    status = db.Column(db.String(20), default=STATUS_NEW)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'status': self.status,
            'notes': self.notes,
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Booking {self.id} status={self.status}>'
