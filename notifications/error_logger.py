"""
Error logging utility for the notification batch.

Logs fetch and delivery errors to timestamped files for debugging.
"""

import os
from datetime import datetime
from typing import Any


def _get_log_dir() -> str:
    return os.getenv("ERROR_LOG_DIR") or os.path.join(os.path.dirname(__file__), "logs")


def log_notification_error(
    error_type: str, error_message: str, context: dict[str, Any] | None = None
) -> str | None:
    """
    Log a notification error to a timestamped file.

    Args:
        error_type: Type of error (e.g., 'fetching', 'sending')
        error_message: The error message
        context: Optional dictionary with additional context (user_id, location_id, etc.)

    Returns:
        Path to the log file created, or None if the report could not be written
    """
    log_dir = _get_log_dir()
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = os.path.join(log_dir, f"{error_type}_error_{timestamp}.txt")
    suffix = 1
    while os.path.exists(filename):
        filename = os.path.join(log_dir, f"{error_type}_error_{timestamp}_{suffix}.txt")
        suffix += 1

    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Notification Error Report - {datetime.now()}\n")
            f.write("=" * 60 + "\n\n")
            f.write(f"Error Type: {error_type}\n")
            f.write(f"Error Message: {error_message}\n\n")

            if context:
                f.write("Context:\n")
                f.write("-" * 60 + "\n")
                for key, value in context.items():
                    f.write(f"{key}: {value}\n")
    except OSError as e:
        print(f"    ⚠️  Could not write error report to {log_dir}: {e}")
        return None

    return filename
