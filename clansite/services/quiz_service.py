# clansite/services/quiz_service.py
"""Quiz scoring and the quiz-open gate"""

from flask import current_app, session
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..errors import StorageError
from ..models.setting import SiteSetting

# Fixed answer key: 5 questions, 5 points each
ANSWER_KEY = {
    'q1': 'b',
    'q2': 'b',
    'q3': 'b',
    'q4': 'c',
    'q5': 'c',
}
POINTS_PER_QUESTION = 5
MAX_SCORE = POINTS_PER_QUESTION * len(ANSWER_KEY)


def score_answers(answers):
    """
    Score a mapping of question key to selected option.

    Unknown keys and wrong answers contribute 0.

    Returns:
        tuple: (score, total)
    """
    score = 0
    if isinstance(answers, dict):
        for question, answer in answers.items():
            if question in ANSWER_KEY and answer == ANSWER_KEY[question]:
                score += POINTS_PER_QUESTION
    return score, MAX_SCORE


class QuizGate:
    """
    Single authority for the quiz-open flag.

    scope='global' keeps one persisted flag seen by every session and
    restart. scope='session' keeps a private copy per browser session.
    """
    SCOPE_GLOBAL = 'global'
    SCOPE_SESSION = 'session'
    SCOPES = (SCOPE_GLOBAL, SCOPE_SESSION)

    SESSION_KEY = 'quiz_open'

    def __init__(self, scope=SCOPE_GLOBAL):
        if scope not in self.SCOPES:
            raise ValueError(f"Unknown quiz flag scope: {scope!r}")
        self.scope = scope

    @property
    def is_global(self):
        return self.scope == self.SCOPE_GLOBAL

    def init_session(self):
        """Called on login: default the session copy to closed only if unset."""
        if self.SESSION_KEY not in session:
            session[self.SESSION_KEY] = False

    def is_open(self):
        if not self.is_global:
            return bool(session.get(self.SESSION_KEY, False))
        try:
            return bool(SiteSetting.get(SiteSetting.KEY_QUIZ_OPEN, False))
        except SQLAlchemyError as e:
            current_app.logger.error(f"Failed to read quiz status: {e}", exc_info=True)
            raise StorageError() from e

    def set_open(self, is_open):
        is_open = bool(is_open)
        if not self.is_global:
            session[self.SESSION_KEY] = is_open
            return is_open
        try:
            SiteSetting.set(SiteSetting.KEY_QUIZ_OPEN, is_open)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to update quiz status: {e}", exc_info=True)
            raise StorageError() from e

        current_app.logger.info(f"Quiz status changed: open={is_open}")
        return is_open
