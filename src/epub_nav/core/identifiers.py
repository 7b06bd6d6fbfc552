"""Best-effort extraction of ISBNs and modification dates."""

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, timezone

from dateutil import parser as dateparser

from epub_nav.models.isbn import ISBN

log = logging.getLogger(__name__)

# One or more digit groups, each optionally followed by a hyphen
ISBN_LIKE = re.compile(r"(?:\d+-?)+")
PLAIN_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def find_isbn_candidate(text: str) -> str | None:
    """Return the first ISBN-looking run of digits in text, if any."""
    match = ISBN_LIKE.search(text)
    return match.group(0) if match else None


def parse_isbn(text: str | None) -> ISBN | None:
    """Parse the first ISBN-looking substring of text."""
    if not text:
        return None
    candidate = find_isbn_candidate(text)
    if candidate is None:
        return None
    isbn = ISBN.try_parse(candidate)
    if isbn is None:
        log.debug("ISBN candidate %r from %r did not validate", candidate, text)
    return isbn


def first_isbn(texts: Iterable[str]) -> ISBN | None:
    """Return the first ISBN that parses, scanning texts in order.

    A text whose candidate fails validation does not stop the scan.
    """
    for text in texts:
        isbn = parse_isbn(text)
        if isbn is not None:
            return isbn
    return None


def normalize_date(text: str | None) -> str | None:
    """Render a date as a UTC timestamp like 2011-01-01T12:00:00Z.

    A plain calendar date is midnight UTC. Reduced W3C dates (2011-01, 2011)
    start at the first instant of the period, and other formats such as
    RFC 1123 stamps go through dateutil. Date-times without an offset are
    taken as UTC. Returns None when there is nothing to parse.
    """
    if text is None:
        return None
    text = text.strip()

    if PLAIN_DATE.fullmatch(text):
        try:
            day = date.fromisoformat(text)
        except ValueError:
            log.debug("Unparseable date: %r", text)
            return None
        value = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    else:
        value = _parse_datetime(text)
        if value is None:
            log.debug("Unparseable date: %r", text)
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)

    try:
        value = value.astimezone(timezone.utc)
    except OverflowError:
        log.debug("Date out of range in UTC: %r", text)
        return None
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _parse_datetime(text: str) -> datetime | None:
    try:
        return dateparser.isoparse(text)
    except (ValueError, OverflowError):
        pass
    try:
        return dateparser.parse(text, default=datetime(1, 1, 1))
    except (ValueError, OverflowError):
        return None
