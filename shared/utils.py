from datetime import datetime
from dateutil import parser as date_parser


def format_issuance_time(date_str: str | None) -> str:
    """Render a product issuance timestamp for log lines."""
    if not date_str:
        return "unknown time"
    try:
        dt = date_parser.isoparse(date_str)
    except (ValueError, OverflowError, TypeError):
        return date_str
    return dt.strftime("%Y-%m-%d %H:%M %Z").strip()


def print_summary(sent: int, failed: int, missing: int, skipped: int) -> None:
    """Print batch summary."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] Processing Complete!")
    print(f"{'=' * 60}")
    print(f"✓ Sections Sent: {sent}")
    print(f"✗ Failed Deliveries: {failed}")
    print(f"⊘ Missing Sections: {missing}")
    print(f"⚠️  Skipped Users (fetch failed): {skipped}")
    print(f"{'=' * 60}\n")
