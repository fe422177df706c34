"""Helper functions for creating mocked external services."""

from typing import Any, List, Optional
from unittest.mock import Mock

import requests


def create_mock_requests_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
    json_error: Optional[Exception] = None,
):
    """Create a mocked requests Response object."""
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.text = text

    if json_error:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = json_data

    return mock_response


def create_mock_session(responses: Optional[List[Any]] = None):
    """
    Create a mocked requests Session.

    Args:
        responses: Responses (or exceptions) returned by successive get() calls

    Returns:
        Mock session with a real headers dict
    """
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.get.side_effect = list(responses or [])
    return session


def create_mock_twilio_client(sid: str = "SM0000000000000000000000000000000", side_effect=None):
    """
    Create a mocked Twilio REST client.

    Args:
        sid: Message SID returned by messages.create()
        side_effect: Exception, or list of results/exceptions, for messages.create()
    """
    client = Mock()
    client.messages.create.return_value = Mock(sid=sid)
    if side_effect is not None:
        client.messages.create.side_effect = side_effect
    return client
