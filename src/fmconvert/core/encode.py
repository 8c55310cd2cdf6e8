"""Serialize a TargetRecord as TOML front matter between '+++' delimiters"""

from typing import Any

import tomli_w

from fmconvert.core.errors import EncodeError
from fmconvert.core.models import TargetRecord


DELIMITER = "+++"


def _drop_none(value: Any) -> Any:
    """Recursively remove None entries; TOML has no null."""
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value if v is not None]
    return value


def encode_record(record: TargetRecord) -> list[str]:
    """Return output lines: opening '+++', TOML body, closing '+++'."""
    data = _drop_none(record.model_dump(exclude_none=True))
    try:
        body = tomli_w.dumps(data)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"cannot serialize front matter as TOML: {e}") from e
    return [DELIMITER, *body.splitlines(), DELIMITER]
