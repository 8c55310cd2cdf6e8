"""Source (YAML) and target (TOML) front matter records"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _one_or_many(value: Any) -> Any:
    """Canonicalize a scalar-or-list value to an ordered list.

    None becomes [], a lone scalar becomes [scalar]. Numbers are rendered
    as text; anything else is left for pydantic to reject.
    """
    if value is None:
        return []
    items = list(value) if isinstance(value, (list, tuple)) else [value]
    return [str(v) if isinstance(v, (int, float)) and not isinstance(v, bool) else v for v in items]


OneOrMany = Annotated[list[str], BeforeValidator(_one_or_many)]


class SourceRecord(BaseModel):
    """Decoded YAML front matter. Keys are lowercase; unknown keys are kept as extras."""
    model_config = ConfigDict(extra="allow")

    title:       Optional[str] = None
    description: Optional[str] = None
    date:        Optional[str] = None
    lastmod:     Optional[str] = None
    draft:       Optional[bool] = None
    slug:        Optional[str] = None
    path:        Optional[str] = None
    alias:       Optional[str] = None

    category:    OneOrMany = Field(default_factory=list)
    categories:  OneOrMany = Field(default_factory=list)
    tags:        OneOrMany = Field(default_factory=list)
    aliases:     OneOrMany = Field(default_factory=list)

    # custom fields with no named slot in the target schema
    snapdate:    Optional[str] = None
    photo_id:    Optional[Union[int, str]] = None
    colors:      OneOrMany = Field(default_factory=list)
    image:       Optional[str] = None
    thumbnail:   Optional[str] = None

    @property
    def unknown(self) -> dict[str, Any]:
        """Keys present in the source that belong to no declared field."""
        return dict(self.model_extra or {})


DATE_FIELDS = ("date", "lastmod", "snapdate")
EXTRA_FIELDS = ("snapdate", "photo_id", "colors", "image", "thumbnail")
TAXONOMY_FIELDS = ("category", "categories", "tags")


class TargetRecord(BaseModel):
    """Zola-style front matter. None fields are omitted on encode."""
    title:       Optional[str] = None
    description: Optional[str] = None
    date:        Optional[str] = None
    updated:     Optional[str] = None
    draft:       Optional[bool] = None
    slug:        Optional[str] = None
    path:        Optional[str] = None
    aliases:     Optional[list[str]] = None
    taxonomies:  dict[str, list[str]] = Field(default_factory=dict)
    extra:       dict[str, Any] = Field(default_factory=dict)
