"""
Clan Site - Inquiry Model
"""
from datetime import datetime
from ..extensions import db
from .booking import generate_id, isoformat


class Inquiry(db.Model):
    """Contact form message awaiting an admin response."""
    __tablename__ = 'inquiries'

    # Statuses
    STATUS_NEW = 'new'
    STATUS_IN_PROGRESS = 'in_progress'
    STATUS_CLOSED = 'closed'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_NEW, index=True)
    response = db.Column(db.Text)
    responded_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def respond(self, status, response):
        """Set status and response; the response time is stamped only with a response."""
        self.status = status or self.status
        self.response = response
        self.responded_at = datetime.utcnow() if response else None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'message': self.message,
            'status': self.status,
            'response': self.response,
            'respondedAt': isoformat(self.responded_at),
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Inquiry {self.id} status={self.status}>'
