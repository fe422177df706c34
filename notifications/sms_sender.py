"""
SMS sending via the Twilio API.

Sends one text message per resolved forecast discussion section.
"""

from typing import Any, Dict, List

from requests import RequestException
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from models.delivery import ResolvedSection
from models.subscriber import SmsConfig, Subscriber
from notifications.error_logger import log_notification_error


def create_sms_client(config: SmsConfig) -> Client:
    """Create a Twilio REST client from account settings."""
    return Client(config.account_sid, config.auth_token)


def send_sms(client: Client, from_phone: str, to_phone: str, body: str) -> Dict[str, Any]:
    """
    Send a single SMS message.

    Args:
        client: Twilio REST client
        from_phone: Sender phone number
        to_phone: Recipient phone number
        body: Message text

    Returns:
        Dictionary with 'success' (bool), 'message_sid' (str if success), 'error' (str if failed)
    """
    try:
        message = client.messages.create(from_=from_phone, to=to_phone, body=body)
        return {
            'success': True,
            'message_sid': message.sid
        }

    except (TwilioException, RequestException) as e:
        return {
            'success': False,
            'error': str(e)
        }


def deliver_sections(
    client: Client,
    config: SmsConfig,
    subscriber: Subscriber,
    sections: List[ResolvedSection],
    dry_run: bool = False,
) -> Dict[str, int]:
    """
    Send each found section to the subscriber, one message per section.

    A failed send is reported and logged; the remaining sections are still sent.

    Returns:
        Dictionary with counts: sent, failed
    """
    stats = {"sent": 0, "failed": 0}

    for section in sections:
        if not section.found:
            continue

        if dry_run:
            print(f"  [DRY RUN] Would send {section.name.upper()} to {subscriber.phone}")
            print(section.text)
            stats["sent"] += 1
            continue

        result = send_sms(client, config.from_phone, subscriber.phone, section.text)

        if result["success"]:
            print(f"  ✓ Sent {section.name.upper()} ({result.get('message_sid')})")
            stats["sent"] += 1
        else:
            error_msg = result.get("error", "Unknown error")
            print(f"  ✗ Failed to send {section.name.upper()}: {error_msg}")
            stats["failed"] += 1

            error_file = log_notification_error(
                error_type="sending",
                error_message=error_msg,
                context={
                    "user_id": subscriber.id,
                    "phone": subscriber.phone,
                    "section": section.name,
                },
            )
            if error_file:
                print(f"    Error details logged to: {error_file}")

    return stats
