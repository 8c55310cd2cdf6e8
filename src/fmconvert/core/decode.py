"""Decode a normalized front matter block into a SourceRecord"""

import re
from typing import Any

import yaml
from pydantic import ValidationError

from fmconvert.core.errors import DecodeError
from fmconvert.core.models import SourceRecord


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 style scalars.

    Timestamps stay plain strings for the date normalizer, and only
    true/false are booleans, so 'title: No' or 'tags: [yes, on]' stay text.
    """


_DROPPED_TAGS = ("tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool")

FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _DROPPED_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list("tTfF"),
)


def load_block(lines: list[str]) -> dict[str, Any]:
    """Parse block lines as a YAML mapping; an empty block yields {}."""
    text = "\n".join(lines)
    try:
        data = yaml.load(text, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        where = f" (line {mark.line + 1})" if mark is not None else ""
        raise DecodeError(f"invalid YAML front matter{where}: {getattr(e, 'problem', None) or e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(f"front matter must be a mapping, got {type(data).__name__}")
    bad = [k for k in data if not isinstance(k, str)]
    if bad:
        raise DecodeError(f"front matter keys must be strings, got {bad[0]!r}")
    return data


def decode_block(lines: list[str], reject_unknown: bool = False) -> SourceRecord:
    """Decode normalized block lines into a SourceRecord.

    Unknown keys are kept on the record unless reject_unknown is set.
    """
    data = load_block(lines)
    try:
        record = SourceRecord.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise DecodeError(f"invalid field(s): {fields}") from e
    if reject_unknown and record.unknown:
        raise DecodeError(f"unrecognized key(s): {', '.join(sorted(record.unknown))}")
    return record
