from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from acffields.core.contracts import FieldObject, coerce_field
from acffields.core.entity_keys import StorageKey, flatten_storage_key
from acffields.providers.registry import register_provider


def _coerce_fields(fields: Mapping[str, Any]) -> Dict[str, FieldObject]:
    return {name: coerce_field(name, raw) for name, raw in fields.items()}


@register_provider(kind="memory")
class InMemoryFieldProvider:
    """Field provider backed by a dict of ``storage key -> {field name: field}``.

    Keys are compared in their flat string form, so ``5``, ``"5"`` and a
    ``Term(7, "category")`` stored as ``"category_7"`` all resolve. Fields may
    be given as ``FieldObject`` instances, ``{"value": ...}`` records or bare
    values; they are stored as ``FieldObject``.
    """

    def __init__(self, initial: Optional[Mapping[Any, Mapping[str, Any]]] = None):
        self._data: Dict[str, Dict[str, FieldObject]] = {
            flatten_storage_key(k): _coerce_fields(v) for k, v in (initial or {}).items()
        }

    @classmethod
    def from_config(cls, config: Any) -> "InMemoryFieldProvider":
        return cls(config.fields)

    def get_field_objects(self, key: StorageKey) -> Optional[Dict[str, FieldObject]]:
        fields = self._data.get(flatten_storage_key(key))
        if not fields:
            return None
        return dict(fields)

    def set_fields(self, key: StorageKey, fields: Mapping[str, Any]) -> None:
        self._data[flatten_storage_key(key)] = _coerce_fields(fields)

    def clear(self, key: Optional[StorageKey] = None) -> None:
        if key is None:
            self._data.clear()
        else:
            self._data.pop(flatten_storage_key(key), None)
