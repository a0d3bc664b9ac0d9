from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

FieldMap = Dict[str, Any]


@dataclass(frozen=True)
class Comment:
    """Host-platform comment object; the object form of a comment lookup."""
    comment_id: int
    post_id: Optional[int] = None


@dataclass(frozen=True)
class Term:
    """Host-platform taxonomy term; the object form of a term lookup."""
    term_id: int
    taxonomy: str
    name: Optional[str] = None
    slug: Optional[str] = None


@dataclass
class FieldObject:
    """One custom field as handed out by a provider.

    Only ``value`` is read by the reader; everything else rides along to the
    transform callbacks untouched.
    """
    value: Any
    name: Optional[str] = None
    key: Optional[str] = None                   # Provider field key (e.g. "field_5f1a...")
    label: Optional[str] = None
    type: Optional[str] = None                  # text, image, repeater, ...
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, name: str, raw: Mapping[str, Any]) -> "FieldObject":
        extra = {k: v for k, v in raw.items() if k not in ("value", "name", "key", "label", "type")}
        return cls(
            value=raw.get("value"),
            name=raw.get("name", name),
            key=raw.get("key"),
            label=raw.get("label"),
            type=raw.get("type"),
            metadata=extra,
        )


def field_value(field_object: Any) -> Any:
    """Read the stored value off a provider field record (object or mapping).

    A record without a value reads as None.
    """
    if isinstance(field_object, Mapping):
        return field_object.get("value")
    return getattr(field_object, "value", None)


def coerce_field(name: str, raw: Any) -> FieldObject:
    """Build a FieldObject from a fixture entry.

    ``{"value": ..., "type": ...}`` mappings are read as full field records;
    anything else is taken as the bare value.
    """
    if isinstance(raw, FieldObject):
        return raw
    if isinstance(raw, Mapping) and "value" in raw:
        return FieldObject.from_mapping(name, raw)
    return FieldObject(value=raw, name=name)
