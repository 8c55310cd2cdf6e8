"""Conversion pipeline: scan -> normalize -> decode -> dates -> map -> encode"""

from typing import Iterable

from fmconvert.config import Settings
from fmconvert.core.decode import decode_block
from fmconvert.core.dates import normalize_dates
from fmconvert.core.encode import encode_record
from fmconvert.core.mapper import map_record
from fmconvert.core.models import TargetRecord
from fmconvert.core.normalize import normalize_keys
from fmconvert.core.scan import scan_front_matter


def convert_record(lines: Iterable[str], settings: Settings = None) -> TargetRecord:
    """Run every stage up to (not including) encoding."""
    settings = settings or Settings()
    block = normalize_keys(scan_front_matter(lines))
    source = decode_block(block, reject_unknown=settings.unknown_keys == "error")
    source = normalize_dates(
        source,
        strict=settings.strict_dates,
        required=("date",) if settings.require_date else (),
    )
    return map_record(source, unknown_keys=settings.unknown_keys)


def convert_lines(lines: Iterable[str], settings: Settings = None) -> list[str]:
    """Convert YAML front matter lines into '+++'-wrapped TOML lines."""
    return encode_record(convert_record(lines, settings))


def convert_text(text: str, settings: Settings = None) -> str:
    """Convert a whole document; returns only the TOML front matter."""
    return "\n".join(convert_lines(text.splitlines(), settings)) + "\n"
