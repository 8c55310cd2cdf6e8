"""Lowercase the leading key of each front matter line before YAML decoding"""

import re


# Unindented key, optional spaces, then a colon that ends the key (not '://').
KEY_RE = re.compile(r'^([A-Za-z_][A-Za-z0-9_-]*)[ \t]*:(?=\s|$)')


def normalize_key(line: str) -> str:
    """Rewrite 'Title : x' as 'title: x'; lines without a leading key are unchanged."""
    m = KEY_RE.match(line)
    if not m:
        return line
    return f"{m.group(1).lower()}:{line[m.end():]}"


def normalize_keys(lines: list[str]) -> list[str]:
    return [normalize_key(line) for line in lines]
