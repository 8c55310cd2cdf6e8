"""Schema mapping from the YAML blog schema onto the TOML (Zola) schema"""

import logging
from typing import Any, Optional

from fmconvert.core.models import EXTRA_FIELDS, TAXONOMY_FIELDS, SourceRecord, TargetRecord


log = logging.getLogger(__name__)

UNKNOWN_KEY_POLICIES = ("drop", "extra", "error")


def _first(*candidates: Optional[str]) -> Optional[str]:
    """First non-empty candidate, else None."""
    for c in candidates:
        if c:
            return c
    return None


def _present(value: Any) -> bool:
    return value is not None and value != [] and value != ""


def build_extra(record: SourceRecord) -> dict[str, Any]:
    """Custom fields under their original keys, only when present in the source."""
    return {name: getattr(record, name) for name in EXTRA_FIELDS if _present(getattr(record, name))}


def map_record(record: SourceRecord, unknown_keys: str = "drop") -> TargetRecord:
    """Map a decoded, date-normalized SourceRecord onto a TargetRecord.

    Unknown keys are dropped unless unknown_keys == "extra", which files them
    under extra. Rejecting them ("error") happens at decode time.
    Taxonomy conversion (category/categories/tags) is not implemented:
    taxonomies is always empty.
    """
    if unknown_keys not in UNKNOWN_KEY_POLICIES:
        raise ValueError(f"unknown_keys must be one of {UNKNOWN_KEY_POLICIES}, got {unknown_keys!r}")

    extra = build_extra(record)
    unknown = record.unknown
    if unknown and unknown_keys == "extra":
        extra.update({k: v for k, v in unknown.items() if k not in extra})
    elif unknown:
        log.debug("dropping unrecognized key(s): %s", ", ".join(sorted(unknown)))

    deferred = [name for name in TAXONOMY_FIELDS if getattr(record, name)]
    if deferred:
        log.warning("taxonomy conversion not supported; not carried over: %s", ", ".join(deferred))

    return TargetRecord(
        title=record.title,
        description=record.description,
        date=record.date,
        updated=_first(record.lastmod, record.date),
        draft=record.draft,
        slug=record.slug,
        path=_first(record.path, record.alias),
        aliases=list(record.aliases) or None,
        taxonomies={},
        extra=extra,
    )
