"""
Notification system for the AFD section notifier.

This module handles:
- Resolving each user's subscriptions against their latest AFD
- Sending one SMS per resolved section via Twilio
- Processing the whole subscriber batch
"""

from .resolver import resolve_sections
from .sms_sender import deliver_sections, send_sms

__all__ = [
    'resolve_sections',
    'deliver_sections',
    'send_sms',
]
