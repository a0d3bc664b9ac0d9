from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from acffields.core.entity_keys import StorageKey

FIELD_OBJECTS_ACCESSOR = "get_field_objects"


class FieldProvider(Protocol):
    def get_field_objects(self, key: StorageKey) -> Optional[Mapping[str, Any]]:
        ...


def is_provider_active(provider: Optional[Any]) -> bool:
    """Whether ``provider`` is installed and exposes the field-object accessor."""
    if provider is None:
        return False
    return callable(getattr(provider, FIELD_OBJECTS_ACCESSOR, None))
