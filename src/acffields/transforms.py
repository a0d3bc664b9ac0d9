"""
Field value transforms.

Every value a ``FieldReader`` returns passes through a ``TransformChain``.
Callbacks run in registration order, each receiving the previous result::

    chain = TransformChain()

    @chain.add
    def strip_text(value, key, field, hook_name):
        return value.strip() if isinstance(value, str) else value

An empty chain hands values back unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Union

from acffields.core.entity_keys import EntityKey

DEFAULT_HOOK_NAME = "ln_acf_field"

FieldTransform = Callable[[Any, EntityKey, Any, str], Any]


class TransformChain:
    def __init__(self, callbacks: Optional[Iterable[FieldTransform]] = None):
        self._callbacks: List[FieldTransform] = list(callbacks or [])

    def add(self, callback: FieldTransform) -> FieldTransform:
        """Append a callback; returns it so ``add`` doubles as a decorator."""
        if not callable(callback):
            raise TypeError(f"transform must be callable, got {type(callback).__name__}")
        self._callbacks.append(callback)
        return callback

    def remove(self, callback: FieldTransform) -> None:
        self._callbacks.remove(callback)

    def clear(self) -> None:
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __call__(self, value: Any, key: EntityKey, field: Any, hook_name: str = DEFAULT_HOOK_NAME) -> Any:
        for callback in self._callbacks:
            value = callback(value, key, field, hook_name)
        return value


def as_transform_chain(
    transform: Union[None, TransformChain, FieldTransform, Iterable[FieldTransform]],
) -> TransformChain:
    """Normalise the ``transform`` argument accepted by ``FieldReader``."""
    if transform is None:
        return TransformChain()
    if isinstance(transform, TransformChain):
        return transform
    if callable(transform):
        return TransformChain([transform])
    return TransformChain(transform)
