"""Date normalization: accept three textual date forms, emit one RFC 3339 timestamp"""

import logging
import re
from datetime import date, datetime, time, timezone
from typing import Iterable, Optional

from fmconvert.core.errors import DateParseError
from fmconvert.core.models import DATE_FIELDS, SourceRecord


log = logging.getLogger(__name__)

TIMESTAMP_RE = re.compile(r'^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}')
DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def _parse_timestamp(text: str) -> Optional[datetime]:
    """Parse an offset-bearing timestamp; None if naive or malformed."""
    if not TIMESTAMP_RE.match(text):
        return None
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None
    return dt if dt.tzinfo is not None else None


def _parse_date(text: str) -> Optional[datetime]:
    if not DATE_RE.match(text):
        return None
    try:
        return datetime.combine(date.fromisoformat(text), time(0, 0), tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_date(raw: str) -> Optional[datetime]:
    """Try, in order: explicit offset, implied UTC offset, bare calendar date."""
    text = raw.strip()
    dt = _parse_timestamp(text)
    if dt is None:
        dt = _parse_timestamp(text + "Z")
        if dt is not None:
            log.debug("no offset in %r, assuming UTC", raw)
    if dt is None:
        dt = _parse_date(text)
    return dt


def normalize_date(raw: str, strict: bool = False, field: str = "date") -> Optional[str]:
    """Return the canonical timestamp text for raw, or None (raise if strict)."""
    dt = parse_date(raw)
    if dt is not None:
        return dt.isoformat()
    if strict:
        raise DateParseError(field, raw)
    log.warning("ignoring unrecognized %s value %r", field, raw)
    return None


def normalize_dates(
    record: SourceRecord,
    strict: bool = False,
    required: Iterable[str] = (),
    ) -> SourceRecord:
    """Return a copy of record with every date field normalized.

    Fields named in required must be present and parseable regardless of strict.
    """
    required = set(required)
    updates = {}
    for name in DATE_FIELDS:
        raw = getattr(record, name)
        if raw is None:
            if name in required:
                raise DateParseError(name, None)
            continue
        updates[name] = normalize_date(raw, strict=strict or name in required, field=name)
    return record.model_copy(update=updates)
