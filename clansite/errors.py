"""
Clan Site - Error Types

Every error raised by the services carries the HTTP status and the message
shown to the caller. Internal details never go into ``message``.
"""


class ClanSiteError(Exception):
    """Base error for service-level failures."""
    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(ClanSiteError):
    """A required field is missing (e.g. no file attached)."""
    status_code = 400
    default_message = 'Invalid request'


class PermissionDeniedError(ClanSiteError):
    """The operation is not allowed right now (e.g. quiz closed)."""
    status_code = 403
    default_message = 'Permission denied'


class NotFoundError(ClanSiteError):
    """No row matches the given id."""
    status_code = 404
    default_message = 'Not found'


class StorageError(ClanSiteError):
    """A database or file-system operation failed."""
    status_code = 500
    default_message = 'A storage error occurred, please try again later'


class DeliveryError(ClanSiteError):
    """Email delivery failed. Logged only, never returned to callers."""
    default_message = 'Email delivery failed'
