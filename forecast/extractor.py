"""
Section extraction for Area Forecast Discussion text.

AFD sections start with a header such as ``.SYNOPSIS...`` or ``.AVIATION``
followed by whitespace, and end at a line holding ``&&``. Extracted text is
normalized to undo the bulletin's hard line wrapping before delivery.
"""

import re
from functools import lru_cache

from config.forecast_sections import SECTION_TERMINATOR
from forecast.errors import SectionNotFoundError

# ASCII whitespace plus every Unicode space separator (category Zs)
_SPACE_CHARS = "\t\n\f\r \u00a0\u1680\u2000-\u200a\u202f\u205f\u3000"

_LEADING_TRAILING_WS_RE = re.compile(f"\\A[{_SPACE_CHARS}]+|[{_SPACE_CHARS}]+\\Z")
_LONE_NEWLINE_RE = re.compile(r"(?<=[^\n])\n(?=[^\n])")
# A run of two or more spaces, counting tabs and CRs caught inside the run
_MULTIPLE_SPACES_RE = re.compile(r"(?: [\t\r]*){2,}")
_TAB_CR_RE = re.compile(r"[\t\r]")

_HEADER_RE = re.compile(
    r"^\.([A-Z][A-Z0-9]*(?:[ /][A-Z0-9]+)*)(?=[.\s].*?" + re.escape(SECTION_TERMINATOR) + ")",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)


def normalize(raw_text: str) -> str:
    """
    Normalize whitespace in an extracted section body.

    Steps, in order:
        1. Trim leading and trailing whitespace (including Unicode spaces)
        2. Join lines split by a single newline (blank lines are kept)
        3. Delete runs of two or more spaces
        4. Delete carriage returns and tabs

    Args:
        raw_text: Text captured between a section header and its terminator

    Returns:
        Normalized text
    """
    if not raw_text:
        return ""

    output = _LEADING_TRAILING_WS_RE.sub("", raw_text)
    output = _LONE_NEWLINE_RE.sub("", output)
    output = _MULTIPLE_SPACES_RE.sub("", output)
    output = _TAB_CR_RE.sub("", output)
    return output


def format_section(section_name: str, section_text: str) -> str:
    """Prefix section text with its uppercase name and a blank line."""
    return f"{section_name.upper()}:\n\n{section_text}"


@lru_cache(maxsize=64)
def _section_pattern(section_name: str) -> re.Pattern[str]:
    return re.compile(
        r"\." + re.escape(section_name) + r"[.\s]+(.+?)" + re.escape(SECTION_TERMINATOR),
        re.IGNORECASE | re.DOTALL,
    )


def extract_section(product_text: str, section_name: str) -> str:
    """
    Extract a named section from AFD product text.

    Only the first matching section in document order is returned. The
    section must be closed by ``&&``; an unterminated section is not matched.

    Args:
        product_text: Full raw product text
        section_name: Section to extract, any case (e.g. "synopsis")

    Returns:
        Formatted section, e.g. "SYNOPSIS:\\n\\n<normalized text>"

    Raises:
        SectionNotFoundError: If the header is absent, unterminated or empty
    """
    name = section_name.strip().upper()
    if not name or not product_text:
        raise SectionNotFoundError(name)

    match = _section_pattern(name).search(product_text)
    if not match or not match.group(1):
        raise SectionNotFoundError(name)

    section_text = normalize(match.group(1))
    if not section_text:
        raise SectionNotFoundError(name)

    return format_section(name, section_text)


def list_sections(product_text: str) -> list[str]:
    """
    List the terminated section headers found in product text.

    Returns:
        Uppercase header names in document order, without duplicates
    """
    if not product_text:
        return []

    names: list[str] = []
    for match in _HEADER_RE.finditer(product_text):
        name = match.group(1).strip().upper()
        if name and name not in names:
            names.append(name)
    return names
