"""
Clan Site - Result Model (uploaded player result files)
"""
from datetime import datetime
from ..extensions import db
from .booking import generate_id, isoformat


class Result(db.Model):
    """Admin-uploaded file associated with a player's phone number."""
    __tablename__ = 'results'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    player_phone = db.Column(db.String(30), nullable=False, index=True)
    player_name = db.Column(db.String(100))
    file_url = db.Column(db.String(500), nullable=False)
    uploaded_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'playerPhone': self.player_phone,
            'playerName': self.player_name,
            'fileUrl': self.file_url,
            'uploadedAt': isoformat(self.uploaded_at),
        }

    def __repr__(self):
        return f'<Result {self.id} phone={self.player_phone}>'
