"""
CLI script for sending subscribed AFD sections to every user.

Usage:
    # Send sections to all users in users.json using config_dev.json
    python -m notifications.process_subscribers

    # Custom input files
    python -m notifications.process_subscribers --users users.json --config config_prod.json

    # Dry run (print messages instead of sending SMS)
    python -m notifications.process_subscribers --dry-run

    # Show which sections the latest AFD for a location contains
    python -m notifications.process_subscribers --list-sections LWX
"""

import argparse
import sys
from datetime import datetime
from typing import Any, List, Optional

from config.forecast_sections import KNOWN_SECTIONS
from forecast.client import ForecastClient
from forecast.errors import ForecastError
from forecast.extractor import list_sections
from models.delivery import SubscriberOutcome
from models.subscriber import SmsConfig, Subscriber
from notifications.error_logger import log_notification_error
from notifications.resolver import resolve_sections
from notifications.sms_sender import create_sms_client, deliver_sections
from shared.config import (
    ConfigError,
    get_nws_settings,
    load_sms_config,
    load_subscribers,
)
from shared.utils import print_summary


def process_subscriber(
    subscriber: Subscriber,
    client: ForecastClient,
    sms_client: Any,
    sms_config: SmsConfig,
    dry_run: bool = False,
) -> SubscriberOutcome:
    """
    Resolve and deliver one subscriber's sections.

    A fetch failure skips the subscriber entirely (no partial delivery).
    Missing sections and failed sends are counted and processing continues.
    """
    print(
        f"\nProcessing {subscriber.full_name} ({subscriber.location_id}, "
        f"{len(subscriber.subscriptions)} subscriptions)..."
    )

    try:
        sections = resolve_sections(subscriber, client)
    except ForecastError as e:
        error_msg = str(e)
        print(f"  ✗ Could not fetch AFD for {subscriber.location_id}: {error_msg}")

        error_file = log_notification_error(
            error_type="fetching",
            error_message=error_msg,
            context={
                "user_id": subscriber.id,
                "location_id": subscriber.location_id,
                "error_class": e.__class__.__name__,
            },
        )
        if error_file:
            print(f"    Error details logged to: {error_file}")

        return SubscriberOutcome(
            subscriber_id=subscriber.id,
            location_id=subscriber.location_id,
            fetch_error=error_msg,
        )

    stats = deliver_sections(sms_client, sms_config, subscriber, sections, dry_run=dry_run)

    return SubscriberOutcome(
        subscriber_id=subscriber.id,
        location_id=subscriber.location_id,
        sections=sections,
        sent=stats["sent"],
        failed=stats["failed"],
        missing=sum(1 for s in sections if not s.found),
    )


def process_subscribers(
    subscribers: List[Subscriber],
    client: ForecastClient,
    sms_client: Any,
    sms_config: SmsConfig,
    dry_run: bool = False,
) -> List[SubscriberOutcome]:
    """
    Process every subscriber in order and print a summary.

    Returns:
        One outcome per subscriber, in input order
    """
    print(f"[{datetime.now()}] Starting AFD section delivery for {len(subscribers)} users...")

    outcomes = [
        process_subscriber(subscriber, client, sms_client, sms_config, dry_run=dry_run)
        for subscriber in subscribers
    ]

    print_summary(
        sent=sum(o.sent for o in outcomes),
        failed=sum(o.failed for o in outcomes),
        missing=sum(o.missing for o in outcomes),
        skipped=sum(1 for o in outcomes if o.fetch_error is not None),
    )

    return outcomes


def _print_available_sections(client: ForecastClient, location_id: str) -> int:
    try:
        product = client.fetch_latest_discussion(location_id)
    except ForecastError as e:
        print(f"✗ Could not fetch AFD for {location_id}: {e}", file=sys.stderr)
        return 1

    names = list_sections(product.product_text)
    print(f"Sections in latest AFD for {location_id} ({product.id}):")
    for name in names:
        if name in KNOWN_SECTIONS:
            print(f"  - {name}")
        else:
            print(f"  - {name} (nonstandard)")
    if not names:
        print("  (none found)")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Send subscribed Area Forecast Discussion sections by SMS"
    )

    parser.add_argument(
        "--users",
        type=str,
        help="Path to users JSON file (defaults to USERS_FILE or users.json)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to SMS provider JSON config (defaults to SMS_CONFIG_FILE or config_dev.json)",
    )

    parser.add_argument(
        "--only-user",
        type=int,
        help="Only process the user with this ID",
    )

    parser.add_argument(
        "--list-sections",
        metavar="LOCATION",
        help="Print the section headers in the latest AFD for a location and exit",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode (print messages instead of sending SMS)",
    )

    args = parser.parse_args(argv)

    try:
        client = ForecastClient(**get_nws_settings())
    except ConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)

    if args.list_sections:
        sys.exit(_print_available_sections(client, args.list_sections))

    try:
        subscribers = load_subscribers(args.users)
        sms_config = load_sms_config(args.config)
    except ConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(1)

    if args.only_user is not None:
        subscribers = [s for s in subscribers if s.id == args.only_user]
        if not subscribers:
            print(f"✗ No user with ID {args.only_user}", file=sys.stderr)
            sys.exit(1)

    sms_client = None if args.dry_run else create_sms_client(sms_config)
    process_subscribers(subscribers, client, sms_client, sms_config, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
