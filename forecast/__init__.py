"""
Forecast product access for the AFD section notifier.

This package handles:
- Fetching the latest Area Forecast Discussion from the NWS API
- Extracting and normalizing named discussion sections
"""

from .errors import (
    DecodeError,
    ForecastError,
    NotFoundError,
    RemoteError,
    SectionNotFoundError,
    TransportError,
)
from .extractor import extract_section, list_sections, normalize

__all__ = [
    'ForecastError',
    'TransportError',
    'RemoteError',
    'DecodeError',
    'NotFoundError',
    'SectionNotFoundError',
    'extract_section',
    'list_sections',
    'normalize',
]
