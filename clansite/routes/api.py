"""
Clan Site - Public API Routes
"""
from flask import Blueprint, jsonify
from ..extensions import limiter
from ..services import get_services
from ..utils.helpers import get_payload

api_bp = Blueprint('api', __name__)


@api_bp.route('/booking', methods=['POST'])
@limiter.limit("10 per minute")
def submit_booking():
    """Join request from the public site."""
    data = get_payload()
    booking = get_services().submissions.submit_booking(
        name=data.get('bName', data.get('name')),
        email=data.get('bEmail', data.get('email')),
        phone=data.get('bPhone', data.get('phone')),
    )
    return jsonify({
        'success': True,
        'message': 'Your join request has been submitted',
        'bookingId': booking.id,
    })


@api_bp.route('/results/<phone>', methods=['GET'])
@limiter.limit("60 per minute")
def lookup_results(phone):
    """Results uploaded for a player phone number."""
    results = get_services().submissions.lookup_results(phone)

    if not results:
        return jsonify({'success': False, 'message': 'No results found for this number'})

    return jsonify({'success': True, 'results': [r.to_dict() for r in results]})


@api_bp.route('/contact', methods=['POST'])
@limiter.limit("10 per minute")
def submit_contact():
    """Contact form inquiry."""
    data = get_payload()
    inquiry = get_services().submissions.submit_inquiry(
        name=data.get('name'),
        email=data.get('email'),
        phone=data.get('phone'),
        message=data.get('message'),
    )
    return jsonify({
        'success': True,
        'message': 'Your inquiry has been sent',
        'inquiryId': inquiry.id,
    })


@api_bp.route('/submit-quiz', methods=['POST'])
@limiter.limit("10 per minute")
def submit_quiz():
    """
    Quiz answers.

    Request body:
        name, phone, email: player details
        answers: {question key: selected option}
        score, total: optional pre-computed pair, stored as given
        fullQuestionSet: optional richer payload stored instead of answers
    """
    data = get_payload()
    submission = get_services().submissions.submit_quiz(
        name=data.get('name'),
        phone=data.get('phone'),
        email=data.get('email'),
        answers=data.get('answers') or {},
        score=data.get('score'),
        total=data.get('total'),
        full_question_set=data.get('fullQuestionSet'),
    )
    return jsonify({
        'success': True,
        'message': 'Your result has been recorded',
        'score': submission.score,
        'total': submission.total,
    })


@api_bp.route('/quiz-status', methods=['GET'])
def quiz_status():
    """Whether the quiz currently accepts answers."""
    return jsonify({'isOpen': get_services().quiz_gate.is_open()})
