"""
Clan Site - Database Models
"""
from .admin import AdminCredential
from .booking import Booking
from .inquiry import Inquiry
from .quiz import QuizSubmission
from .result import Result
from .setting import SiteSetting

__all__ = [
    'AdminCredential',
    'Booking',
    'Inquiry',
    'QuizSubmission',
    'Result',
    'SiteSetting',
]
