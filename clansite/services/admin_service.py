# clansite/services/admin_service.py
"""Admin management - authentication, dashboard data, booking/inquiry/quiz upkeep, messages"""

from flask import current_app
from ..extensions import db
from ..errors import NotFoundError, ValidationError
from ..models.admin import AdminCredential
from ..models.booking import Booking
from ..models.inquiry import Inquiry
from ..models.quiz import QuizSubmission
from ..models.result import Result
from ..utils.helpers import commit_or_raise, storage_guard


class AdminService:
    """Operations behind the admin dashboard."""

    def __init__(self, quiz_gate, email_service):
        self.quiz_gate = quiz_gate
        self.email_service = email_service

    def authenticate(self, username, password):
        """
        Verify admin credentials.

        Returns:
            AdminCredential or None. Callers must not tell a wrong username
            apart from a wrong password.
        """
        with storage_guard('looking up admin'):
            admin = AdminCredential.verify(username, password)

        if admin is None:
            current_app.logger.warning("Admin login failed: invalid credentials")
        else:
            current_app.logger.info(f"Admin logged in: {admin.username}")
        return admin

    def list_all(self):
        """
        Every collection, each newest first.

        The four reads are independent; the first failure aborts the whole
        call so a partial dashboard is never returned.
        """
        readers = {
            'bookings': lambda: Booking.query.order_by(Booking.created_at.desc()).all(),
            'inquiries': lambda: Inquiry.query.order_by(Inquiry.created_at.desc()).all(),
            'results': lambda: Result.query.order_by(Result.uploaded_at.desc()).all(),
            'quizzes': lambda: QuizSubmission.query.order_by(QuizSubmission.submitted_at.desc()).all(),
        }
        data = {}
        for key, read in readers.items():
            with storage_guard(f'fetching {key}'):
                data[key] = [row.to_dict() for row in read()]
        return data

    def list_quiz_results(self):
        with storage_guard('fetching quiz results'):
            return QuizSubmission.query.order_by(QuizSubmission.submitted_at.desc()).all()

    def update_booking(self, booking_id, status=None, notes=None):
        """Returns False when no booking has this id."""
        with storage_guard('updating booking'):
            booking = db.session.get(Booking, booking_id)
        if booking is None:
            return False

        if status is not None:
            booking.status = status
        if notes is not None:
            booking.notes = notes
        commit_or_raise('updating booking')

        current_app.logger.info(f"Booking updated: id={booking_id}, status={booking.status}")
        return True

    def delete_booking(self, booking_id):
        """Idempotent: deleting an unknown id is not an error."""
        with storage_guard('deleting booking'):
            deleted = Booking.query.filter_by(id=booking_id).delete(synchronize_session=False)
            db.session.commit()
        current_app.logger.info(f"Booking deleted: id={booking_id}, rows={deleted}")
        return deleted

    def update_inquiry(self, inquiry_id, status=None, response=None):
        """Returns False when no inquiry has this id."""
        with storage_guard('updating inquiry'):
            inquiry = db.session.get(Inquiry, inquiry_id)
        if inquiry is None:
            return False

        inquiry.respond(status, response)
        commit_or_raise('updating inquiry')

        current_app.logger.info(f"Inquiry updated: id={inquiry_id}, status={inquiry.status}")
        return True

    def delete_inquiry(self, inquiry_id):
        """Idempotent: deleting an unknown id is not an error."""
        with storage_guard('deleting inquiry'):
            deleted = Inquiry.query.filter_by(id=inquiry_id).delete(synchronize_session=False)
            db.session.commit()
        current_app.logger.info(f"Inquiry deleted: id={inquiry_id}, rows={deleted}")
        return deleted

    def delete_quiz_result(self, quiz_id):
        """
        Unlike bookings and inquiries, a missing quiz submission is reported.

        Raises:
            NotFoundError: no submission has this id
        """
        with storage_guard('deleting quiz result'):
            deleted = QuizSubmission.query.filter_by(id=quiz_id).delete(synchronize_session=False)
            db.session.commit()
        if not deleted:
            raise NotFoundError('Quiz result not found')

        current_app.logger.info(f"Quiz result deleted: id={quiz_id}")

    def send_message(self, email, message, sender_name=None):
        """
        Queue an email to a player and return without waiting for delivery.

        Raises:
            ValidationError: recipient or message missing
        """
        if not isinstance(email, str) or not email.strip() or not message:
            raise ValidationError('Email and message are required')

        return self.email_service.send_player_message(email, message, sender_name=sender_name)
