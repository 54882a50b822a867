"""
Clan Site - Helper Functions
"""
from contextlib import contextmanager
from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..errors import StorageError


def get_payload():
    """JSON body, falling back to form fields for urlencoded/multipart posts."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def text_field(value):
    """Intake is permissive: missing values are stored as empty strings."""
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def parse_bool(value):
    """Interpret JSON booleans as well as form strings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ('true', '1', 'yes', 'on')


def whole_number(value):
    """
    Integer from a JSON number or a form digit string, else None.

    Booleans, floats and signed or decimal strings are not whole numbers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def mask_phone(phone):
    """Mask a phone number for logs."""
    if not phone:
        return ''
    return f'{phone[:3]}***'


@contextmanager
def storage_guard(action):
    """
    Turn database failures inside the block into StorageError.

    The session is rolled back and the detail is logged; callers only see
    the generic storage message.

    Args:
        action: short description used in the log line (e.g. 'saving booking')
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error {action}: {e}", exc_info=True)
        raise StorageError() from e


def commit_or_raise(action):
    """Commit the session, raising StorageError on failure."""
    with storage_guard(action):
        db.session.commit()
