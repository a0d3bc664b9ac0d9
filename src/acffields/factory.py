from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

from acffields.bootstrap import load_builtin_providers
from acffields.core.logger import get_logger
from acffields.models.reader_config import ReaderConfig
from acffields.providers.registry import ProviderRegistry
from acffields.reader import FieldReader
from acffields.transforms import FieldTransform, TransformChain

logger = get_logger(__name__)


def build_provider(config: Optional[Any]) -> Optional[Any]:
    """Instantiate the provider described by ``config`` (None stays None)."""
    if config is None:
        return None
    load_builtin_providers()
    provider_class = ProviderRegistry.get(config.kind)
    logger.debug(f"Building {config.kind!r} field provider with {provider_class.__name__}")
    return provider_class.from_config(config)


def build_reader(
    config: Union[ReaderConfig, Dict[str, Any], None] = None,
    *,
    transform: Union[None, TransformChain, FieldTransform, Iterable[FieldTransform]] = None,
) -> FieldReader:
    """Build a FieldReader from a ReaderConfig (or its dict form)."""
    if config is None:
        config = ReaderConfig()
    elif not isinstance(config, ReaderConfig):
        config = ReaderConfig.model_validate(config)

    return FieldReader(
        build_provider(config.provider),
        transform=transform,
        hook_name=config.hook_name,
        on_provider_error=config.on_provider_error,
    )
