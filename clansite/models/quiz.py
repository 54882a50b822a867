"""
Clan Site - Quiz Submission Model
"""
import json
from datetime import datetime
from ..extensions import db
from .booking import generate_id, isoformat


class QuizSubmission(db.Model):
    """Scored record of a visitor's quiz attempt."""
    __tablename__ = 'quizzes'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(30), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    # Either the raw answers or the full question set, serialized as JSON
    answers = db.Column(db.Text, nullable=False)
    score = db.Column(db.Integer, nullable=False)
    total = db.Column(db.Integer, nullable=False)
    submitted_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)

    @staticmethod
    def serialize(payload):
        return json.dumps(payload, ensure_ascii=False)

    @property
    def answers_data(self):
        """Deserialized answers blob."""
        try:
            return json.loads(self.answers)
        except (TypeError, ValueError):
            return None

    def to_dict(self):
        # answers stays a JSON string, which is what the dashboard parses
        return {
            'id': self.id,
            'name': self.name,
            'phone': self.phone,
            'email': self.email,
            'answers': self.answers,
            'score': self.score,
            'total': self.total,
            'submittedAt': isoformat(self.submitted_at),
        }

    def __repr__(self):
        return f'<QuizSubmission {self.id} score={self.score}/{self.total}>'
