from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, Type

from acffields.core.exceptions import ProviderRegistryError


class ProviderRegistry:
    _registry: ClassVar[Dict[str, Type[Any]]] = {}

    @classmethod
    def register(
        cls,
        *,
        kind: str,
        provider_class: Type[Any],
        overwrite: bool = False,
    ) -> None:
        if not overwrite and kind in cls._registry:
            existing = cls._registry[kind]
            raise ProviderRegistryError(f"Provider already registered for kind={kind!r}: {existing}")
        cls._registry[kind] = provider_class

    @classmethod
    def get(cls, kind: str) -> Type[Any]:
        try:
            return cls._registry[kind]
        except KeyError as exc:
            raise ProviderRegistryError(f"No provider registered for kind={kind!r}") from exc

    @classmethod
    def try_get(cls, kind: str) -> Optional[Type[Any]]:
        return cls._registry.get(kind)

    @classmethod
    def kinds(cls) -> list[str]:
        return sorted(cls._registry)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def register_provider(*, kind: str, overwrite: bool = False) -> Callable[[Type[Any]], Type[Any]]:
    def decorator(provider_class: Type[Any]) -> Type[Any]:
        ProviderRegistry.register(kind=kind, provider_class=provider_class, overwrite=overwrite)
        return provider_class

    return decorator
