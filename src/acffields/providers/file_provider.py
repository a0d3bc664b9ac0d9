from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from acffields.core.contracts import FieldObject, coerce_field
from acffields.core.entity_keys import StorageKey, flatten_storage_key
from acffields.core.exceptions import ProviderError
from acffields.providers.registry import register_provider


@register_provider(kind="file")
class FileFieldProvider:
    """Field provider reading a JSON or YAML fixture document.

    The document maps storage keys to fields::

        user_42:
          nickname: ada
          avatar: {value: 17, type: image, label: Avatar}

    The file is re-read on every lookup.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @classmethod
    def from_config(cls, config: Any) -> "FileFieldProvider":
        return cls(config.path)

    def _load_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            raise ProviderError(f"Field fixture not found: {self.path}")
        with open(self.path) as f:
            if self.path.suffix == ".json":
                document = json.load(f)
            else:
                document = yaml.safe_load(f)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ProviderError(f"Field fixture must be a mapping of keys to fields: {self.path}")
        return {str(k): v for k, v in document.items()}

    def get_field_objects(self, key: StorageKey) -> Optional[Dict[str, FieldObject]]:
        fields = self._load_file().get(flatten_storage_key(key))
        if not fields:
            return None
        return {name: coerce_field(name, raw) for name, raw in fields.items()}
