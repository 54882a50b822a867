"""
Clan Site - Utilities
"""
from .decorators import admin_required
from .helpers import get_payload, parse_bool, text_field, whole_number, mask_phone, commit_or_raise, storage_guard

__all__ = [
    'admin_required',
    'get_payload',
    'parse_bool',
    'text_field',
    'whole_number',
    'mask_phone',
    'commit_or_raise',
    'storage_guard',
]
