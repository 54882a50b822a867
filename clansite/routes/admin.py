"""
Clan Site - Admin Routes (dashboard API)
"""
from flask import Blueprint, jsonify, request
from ..services import get_services
from ..utils.decorators import admin_required
from ..utils.helpers import get_payload, parse_bool

admin_bp = Blueprint('admin', __name__)


# ============================================
# Dashboard data
# ============================================

@admin_bp.route('/data', methods=['GET'])
@admin_required
def dashboard_data():
    """Bookings, inquiries, results and quizzes in one response."""
    return jsonify(get_services().admin.list_all())


@admin_bp.route('/quiz-results', methods=['GET'])
@admin_required
def quiz_results():
    results = get_services().admin.list_quiz_results()
    return jsonify({'success': True, 'results': [r.to_dict() for r in results]})


@admin_bp.route('/delete-quiz-result/<quiz_id>', methods=['DELETE'])
@admin_required
def delete_quiz_result(quiz_id):
    get_services().admin.delete_quiz_result(quiz_id)
    return jsonify({'success': True, 'message': 'Quiz result deleted'})


# ============================================
# Bookings
# ============================================

@admin_bp.route('/update-booking/<booking_id>', methods=['POST'])
@admin_required
def update_booking(booking_id):
    data = get_payload()
    updated = get_services().admin.update_booking(
        booking_id, status=data.get('status'), notes=data.get('notes')
    )
    if not updated:
        return jsonify({'success': False, 'message': 'Booking not found'})
    return jsonify({'success': True})


@admin_bp.route('/delete-booking/<booking_id>', methods=['DELETE'])
@admin_required
def delete_booking(booking_id):
    get_services().admin.delete_booking(booking_id)
    return jsonify({'success': True, 'message': 'Booking deleted'})


# ============================================
# Inquiries
# ============================================

@admin_bp.route('/update-inquiry/<inquiry_id>', methods=['POST'])
@admin_required
def update_inquiry(inquiry_id):
    data = get_payload()
    updated = get_services().admin.update_inquiry(
        inquiry_id, status=data.get('status'), response=data.get('response')
    )
    if not updated:
        return jsonify({'success': False, 'message': 'Inquiry not found'})
    return jsonify({'success': True})


@admin_bp.route('/delete-inquiry/<inquiry_id>', methods=['DELETE'])
@admin_required
def delete_inquiry(inquiry_id):
    get_services().admin.delete_inquiry(inquiry_id)
    return jsonify({'success': True, 'message': 'Inquiry deleted'})


# ============================================
# Messages
# ============================================

@admin_bp.route('/send-message', methods=['POST'])
@admin_required
def send_message():
    """Email a player. Delivery happens in the background."""
    data = get_payload()
    get_services().admin.send_message(
        data.get('email'), data.get('message'), sender_name=data.get('senderName')
    )
    return jsonify({'success': True, 'message': 'Message sent'})


# ============================================
# Result files
# ============================================

@admin_bp.route('/upload-result', methods=['POST'])
@admin_required
def upload_result():
    """Multipart upload: playerPhone, playerName (optional), resultFile."""
    result = get_services().results.upload_result(
        request.form.get('playerPhone'),
        request.form.get('playerName'),
        request.files.get('resultFile'),
    )
    return jsonify({
        'success': True,
        'message': 'Result uploaded',
        'fileUrl': result.file_url,
    })


@admin_bp.route('/update-result', methods=['POST'])
@admin_required
def update_result():
    """Multipart update: id, playerPhone, playerName, optional replacement resultFile."""
    result = get_services().results.update_result(
        request.form.get('id'),
        player_phone=request.form.get('playerPhone'),
        player_name=request.form.get('playerName'),
        file_storage=request.files.get('resultFile'),
    )
    return jsonify({
        'success': True,
        'message': 'Result updated',
        'fileUrl': result.file_url,
    })


@admin_bp.route('/delete-result/<result_id>', methods=['DELETE'])
@admin_required
def delete_result(result_id):
    get_services().results.delete_result(result_id)
    return jsonify({'success': True, 'message': 'Result deleted'})


# ============================================
# Quiz gate
# ============================================

@admin_bp.route('/quiz-status', methods=['GET'])
@admin_required
def get_quiz_status():
    return jsonify({'success': True, 'isOpen': get_services().quiz_gate.is_open()})


@admin_bp.route('/set-quiz-status', methods=['POST'])
@admin_required
def set_quiz_status():
    data = get_payload()
    is_open = get_services().quiz_gate.set_open(parse_bool(data.get('isOpen')))
    return jsonify({'success': True, 'isOpen': is_open})
