import json
import os

from dotenv import load_dotenv
from pydantic import ValidationError

from config.forecast_sections import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, NWS_BASE_URL
from models.subscriber import SmsConfig, Subscriber, SubscriberList

load_dotenv()


class ConfigError(Exception):
    """A startup input file is missing or malformed."""


def get_users_file() -> str:
    return os.getenv("USERS_FILE", "users.json")


def get_sms_config_file() -> str:
    return os.getenv("SMS_CONFIG_FILE", "config_dev.json")


def get_nws_settings() -> dict[str, str | float]:
    """Get NWS API client settings from the environment."""
    timeout_str = os.getenv("NWS_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout_str)
    except ValueError:
        raise ConfigError(f"NWS_TIMEOUT must be a number, got {timeout_str!r}")

    if timeout <= 0:
        raise ConfigError("NWS_TIMEOUT must be greater than zero")

    return {
        "base_url": os.getenv("NWS_BASE_URL", NWS_BASE_URL),
        "user_agent": os.getenv("NWS_USER_AGENT", DEFAULT_USER_AGENT),
        "timeout": timeout,
    }


def load_json_file(path: str) -> object:
    """Read and decode a JSON document, raising ConfigError on any failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"File not found: {path}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}")


def load_subscribers(path: str | None = None) -> list[Subscriber]:
    """Load the subscriber list from a users JSON document."""
    path = path or get_users_file()
    data = load_json_file(path)
    try:
        return SubscriberList.model_validate(data).users
    except ValidationError as e:
        raise ConfigError(f"Invalid users file {path}: {e}")


def load_sms_config(path: str | None = None) -> SmsConfig:
    """Load Twilio credentials and sender number from a JSON document."""
    path = path or get_sms_config_file()
    data = load_json_file(path)
    try:
        return SmsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid SMS config file {path}: {e}")
