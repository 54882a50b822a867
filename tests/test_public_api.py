"""
Tests for the public submission API
"""
import json
from unittest.mock import patch
from sqlalchemy.exc import SQLAlchemyError
from clansite.errors import StorageError
from clansite.extensions import db
from clansite.models import Booking, Inquiry, QuizSubmission, Result

ALL_CORRECT = {'q1': 'b', 'q2': 'b', 'q3': 'b', 'q4': 'c', 'q5': 'c'}
ALL_WRONG = {'q1': 'a', 'q2': 'a', 'q3': 'a', 'q4': 'a', 'q5': 'a'}


def quiz_payload(**overrides):
    payload = {
        'name': 'Player One',
        'phone': '0501234567',
        'email': 'player@example.com',
        'answers': ALL_CORRECT,
    }
    payload.update(overrides)
    return payload


class TestBooking:

    def test_booking_ids_are_unique_and_rows_round_trip(self, app, client):
        ids = []
        for i in range(3):
            response = client.post('/api/booking', json={
                'bName': f'Player {i}',
                'bEmail': f'p{i}@example.com',
                'bPhone': f'050000000{i}',
            })
            assert response.status_code == 200
            data = response.get_json()
            assert data['success'] is True
            ids.append(data['bookingId'])

        assert len(set(ids)) == 3

        with app.app_context():
            booking = db.session.get(Booking, ids[1])
            assert booking.name == 'Player 1'
            assert booking.email == 'p1@example.com'
            assert booking.phone == '0500000001'
            assert booking.status == Booking.STATUS_NEW
            assert booking.created_at is not None

    def test_booking_accepts_plain_field_names(self, app, client):
        response = client.post('/api/booking', json={
            'name': 'Plain', 'email': 'plain@example.com', 'phone': '0555',
        })
        booking_id = response.get_json()['bookingId']
        with app.app_context():
            assert db.session.get(Booking, booking_id).name == 'Plain'

    def test_booking_accepts_form_encoded_body(self, app, client):
        response = client.post('/api/booking', data={
            'bName': 'Form', 'bEmail': 'form@example.com', 'bPhone': '0566',
        })
        assert response.get_json()['success'] is True

    def test_booking_missing_fields_are_accepted(self, app, client):
        response = client.post('/api/booking', json={})
        assert response.get_json()['success'] is True
        with app.app_context():
            booking = db.session.get(Booking, response.get_json()['bookingId'])
            assert booking.name == ''


class TestContact:

    def test_inquiry_created_with_new_status(self, app, client):
        response = client.post('/api/contact', json={
            'name': 'Visitor',
            'email': 'visitor@example.com',
            'phone': '0511',
            'message': 'When is the next tournament?',
        })
        data = response.get_json()
        assert data['success'] is True

        with app.app_context():
            inquiry = db.session.get(Inquiry, data['inquiryId'])
            assert inquiry.status == Inquiry.STATUS_NEW
            assert inquiry.message == 'When is the next tournament?'
            assert inquiry.response is None
            assert inquiry.responded_at is None


class TestResultLookup:

    def test_unknown_phone_returns_not_found_signal(self, client):
        response = client.get('/api/results/0000000000')
        assert response.status_code == 200
        data = response.get_json()
        assert data['success'] is False
        assert 'results' not in data
        assert data['message']

    def test_matching_results_are_returned(self, app, client):
        with app.app_context():
            db.session.add(Result(player_phone='0522', player_name='A', file_url='/uploads/a.pdf'))
            db.session.add(Result(player_phone='0533', player_name='B', file_url='/uploads/b.pdf'))
            db.session.commit()

        data = client.get('/api/results/0522').get_json()
        assert data['success'] is True
        assert len(data['results']) == 1
        assert data['results'][0]['playerPhone'] == '0522'
        assert data['results'][0]['fileUrl'] == '/uploads/a.pdf'


class TestQuizSubmission:

    def test_closed_quiz_is_rejected_and_nothing_stored(self, app, client):
        response = client.post('/api/submit-quiz', json=quiz_payload())
        assert response.status_code == 403
        assert response.get_json()['success'] is False

        with app.app_context():
            assert QuizSubmission.query.count() == 0

    def test_all_correct_scores_full_marks(self, open_quiz, client):
        data = client.post('/api/submit-quiz', json=quiz_payload()).get_json()
        assert data['success'] is True
        assert data['score'] == 25
        assert data['total'] == 25

    def test_all_wrong_scores_zero(self, open_quiz, client):
        data = client.post('/api/submit-quiz', json=quiz_payload(answers=ALL_WRONG)).get_json()
        assert data['score'] == 0
        assert data['total'] == 25

    def test_extra_and_missing_keys_contribute_nothing(self, open_quiz, client):
        answers = {'q1': 'b', 'q4': 'c', 'q9': 'b', 'bonus': 'x'}
        data = client.post('/api/submit-quiz', json=quiz_payload(answers=answers)).get_json()
        assert data['score'] == 10

    def test_supplied_score_pair_is_stored_unchanged(self, app, open_quiz, client):
        data = client.post('/api/submit-quiz', json=quiz_payload(
            answers=ALL_WRONG, score=42, total=50,
        )).get_json()
        assert (data['score'], data['total']) == (42, 50)

        with app.app_context():
            submission = QuizSubmission.query.one()
            assert (submission.score, submission.total) == (42, 50)

    def test_score_without_total_is_recomputed(self, open_quiz, client):
        data = client.post('/api/submit-quiz', json=quiz_payload(score=99)).get_json()
        assert (data['score'], data['total']) == (25, 25)

    def test_supplied_score_above_total_is_rejected(self, open_quiz, client):
        response = client.post('/api/submit-quiz', json=quiz_payload(score=60, total=50))
        assert response.status_code == 400

    def test_fractional_score_is_rejected_not_truncated(self, app, open_quiz, client):
        response = client.post('/api/submit-quiz', json=quiz_payload(score=12.5, total=25))
        assert response.status_code == 400
        assert response.get_json()['success'] is False

        with app.app_context():
            assert QuizSubmission.query.count() == 0

    def test_boolean_score_pair_is_rejected(self, app, open_quiz, client):
        response = client.post('/api/submit-quiz', json=quiz_payload(score=True, total=True))
        assert response.status_code == 400

        with app.app_context():
            assert QuizSubmission.query.count() == 0

    def test_form_posted_digit_strings_are_accepted(self, app, open_quiz, client):
        response = client.post('/api/submit-quiz', data={
            'name': 'Form Player', 'phone': '0577', 'email': 'f@example.com',
            'score': '20', 'total': '25',
        })
        assert (response.get_json()['score'], response.get_json()['total']) == (20, 25)

    def test_form_posted_decimal_string_is_rejected(self, open_quiz, client):
        response = client.post('/api/submit-quiz', data={
            'name': 'Form Player', 'phone': '0577', 'email': 'f@example.com',
            'score': '12.5', 'total': '25',
        })
        assert response.status_code == 400

    def test_full_question_set_is_stored_instead_of_answers(self, app, open_quiz, client):
        full_set = [{'question': 'Capital of Egypt?', 'selected': 'b', 'correct': 'b'}]
        client.post('/api/submit-quiz', json=quiz_payload(fullQuestionSet=full_set))

        with app.app_context():
            submission = QuizSubmission.query.one()
            assert json.loads(submission.answers) == full_set

    def test_raw_answers_stored_when_no_full_set(self, app, open_quiz, client):
        client.post('/api/submit-quiz', json=quiz_payload())

        with app.app_context():
            assert QuizSubmission.query.one().answers_data == ALL_CORRECT


class TestQuizStatus:

    def test_public_quiz_status_defaults_closed(self, client):
        assert client.get('/api/quiz-status').get_json() == {'isOpen': False}

    def test_public_quiz_status_follows_admin_toggle(self, open_quiz, client):
        assert client.get('/api/quiz-status').get_json() == {'isOpen': True}


class TestStorageFailures:

    def test_booking_write_failure_is_generic_500(self, app, client):
        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk I/O error')):
            response = client.post('/api/booking', json={
                'bName': 'Player', 'bEmail': 'p@example.com', 'bPhone': '0500',
            })

        assert response.status_code == 500
        assert response.get_json() == {'success': False, 'message': StorageError.default_message}
        with app.app_context():
            assert Booking.query.count() == 0

    def test_inquiry_write_failure_is_generic_500(self, app, client):
        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk I/O error')):
            response = client.post('/api/contact', json={
                'name': 'Visitor', 'email': 'v@example.com', 'phone': '0511', 'message': 'hi',
            })

        assert response.status_code == 500
        assert response.get_json() == {'success': False, 'message': StorageError.default_message}
        with app.app_context():
            assert Inquiry.query.count() == 0
