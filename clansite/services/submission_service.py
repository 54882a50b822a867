# clansite/services/submission_service.py
"""Public submissions - bookings, inquiries, quiz answers and result lookup"""

from flask import current_app
from ..extensions import db
from ..errors import PermissionDeniedError, ValidationError
from ..models.booking import Booking
from ..models.inquiry import Inquiry
from ..models.quiz import QuizSubmission
from ..models.result import Result
from ..utils.helpers import commit_or_raise, storage_guard, text_field, mask_phone, whole_number
from .quiz_service import score_answers


class SubmissionService:
    """Anonymous visitor submissions."""

    def __init__(self, quiz_gate):
        self.quiz_gate = quiz_gate

    def submit_booking(self, name, email, phone):
        """
        Store a join request.

        Returns:
            Booking: the new row (id generated here)
        """
        booking = Booking(
            name=text_field(name),
            email=text_field(email),
            phone=text_field(phone),
            status=Booking.STATUS_NEW,
        )
        db.session.add(booking)
        commit_or_raise('saving booking')

        current_app.logger.info(f"Booking created: id={booking.id}, phone={mask_phone(booking.phone)}")
        return booking

    def lookup_results(self, phone):
        """All results uploaded for a phone number, newest first (may be empty)."""
        with storage_guard('fetching results'):
            return Result.query.filter_by(player_phone=phone).order_by(Result.uploaded_at.desc()).all()

    def submit_inquiry(self, name, email, phone, message):
        inquiry = Inquiry(
            name=text_field(name),
            email=text_field(email),
            phone=text_field(phone),
            message=text_field(message),
            status=Inquiry.STATUS_NEW,
        )
        db.session.add(inquiry)
        commit_or_raise('saving inquiry')

        current_app.logger.info(f"Inquiry created: id={inquiry.id}")
        return inquiry

    def submit_quiz(self, name, phone, email, answers, score=None, total=None, full_question_set=None):
        """
        Score and store a quiz attempt.

        A caller-supplied score and total pair is stored as given; otherwise
        the answers are scored against the fixed key. The stored blob is the
        full question set when supplied, else the raw answers.

        Raises:
            PermissionDeniedError: the quiz is closed
            ValidationError: score/total are not integers with 0 <= score <= total
        """
        if not self.quiz_gate.is_open():
            raise PermissionDeniedError('The quiz is currently closed')

        if score is not None and total is not None:
            score, total = whole_number(score), whole_number(total)
            if score is None or total is None:
                raise ValidationError('Score and total must be whole numbers')
            if score < 0 or score > total:
                raise ValidationError('Score must be between 0 and total')
        else:
            score, total = score_answers(answers)

        payload = full_question_set if full_question_set is not None else answers
        submission = QuizSubmission(
            name=text_field(name),
            phone=text_field(phone),
            email=text_field(email),
            answers=QuizSubmission.serialize(payload if payload is not None else {}),
            score=score,
            total=total,
        )
        db.session.add(submission)
        commit_or_raise('saving quiz result')

        current_app.logger.info(
            f"Quiz submitted: id={submission.id}, phone={mask_phone(submission.phone)}, "
            f"score={score}/{total}"
        )
        return submission
