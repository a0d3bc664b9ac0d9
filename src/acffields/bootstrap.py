from __future__ import annotations

import importlib
import sys
from typing import Iterable


BUILTIN_PROVIDER_MODULES: tuple[str, ...] = (
    "acffields.providers.memory",
    "acffields.providers.file_provider",
    "acffields.providers.rest.provider",
)


_LOADED = False


def load_builtin_providers(*, reload: bool = False, modules: Iterable[str] = BUILTIN_PROVIDER_MODULES) -> None:
    """Import built-in provider modules so their decorators register them.

    In tests, call with reload=True after clearing the registry to re-run decorators.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    if reload:
        from acffields.providers.registry import ProviderRegistry

        ProviderRegistry.clear()

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        importlib.import_module(module_name)

    _LOADED = True
