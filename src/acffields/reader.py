"""
FieldReader: all custom field values of one entity as a flat mapping.

The reader is a thin façade over a ``FieldProvider``. Each public lookup builds
an entity key and hands it to ``resolve``, which queries the provider and runs
every value through the transform chain.

Example:
    >>> from acffields import FieldReader, InMemoryFieldProvider
    >>> provider = InMemoryFieldProvider({"user_42": {"nickname": {"value": "ada"}}})
    >>> FieldReader(provider).get_user_fields(42)
    {'nickname': 'ada'}
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from acffields.core.contracts import FieldMap, field_value
from acffields.core.entity_keys import (
    AttachmentKey,
    CommentKey,
    EntityKey,
    OptionKey,
    PostKey,
    TermKey,
    UserKey,
    WidgetKey,
    encode_storage_key,
    entity_key_for,
)
from acffields.core.exceptions import ProviderErrorPolicy, ProviderFailureHandler
from acffields.core.field_provider import FieldProvider, is_provider_active
from acffields.core.logger import get_logger
from acffields.transforms import DEFAULT_HOOK_NAME, FieldTransform, TransformChain, as_transform_chain

logger = get_logger(__name__)


class FieldReader:
    def __init__(
        self,
        provider: Optional[FieldProvider] = None,
        *,
        transform: Union[None, TransformChain, FieldTransform, Iterable[FieldTransform]] = None,
        hook_name: str = DEFAULT_HOOK_NAME,
        on_provider_error: Union[str, ProviderErrorPolicy] = ProviderErrorPolicy.WARN,
    ):
        """
        Args:
            provider: Field storage provider, or None when it is not installed
            transform: Callback, list of callbacks or TransformChain applied to every value
            hook_name: Passed to each callback as its fourth argument
            on_provider_error: fail | warn | allow (see ProviderErrorPolicy)
        """
        self.provider = provider
        self.transform = as_transform_chain(transform)
        self.hook_name = hook_name
        self._failures = ProviderFailureHandler(policy=ProviderErrorPolicy(on_provider_error), logger=logger)

    def is_active(self) -> bool:
        """Whether the field provider is installed and usable."""
        return is_provider_active(self.provider)

    def resolve(self, key: EntityKey) -> FieldMap:
        """Fetch and transform all field values for ``key``."""
        data: FieldMap = {}

        if not self.is_active():
            logger.debug(f"Field provider inactive; no fields for {key!r}")
            return data

        storage_key = encode_storage_key(key)
        try:
            fields = self.provider.get_field_objects(storage_key)  # type: ignore[union-attr]
        except Exception as e:
            self._failures.handle(e, details={"key": storage_key})
            return data

        if not fields:
            return data

        for field_name, field in fields.items():
            data[field_name] = self.transform(field_value(field), key, field, self.hook_name)

        logger.debug(f"Resolved {len(data)} field(s) for {storage_key!r}")
        return data

    def get_post_fields(self, post_id: int = 0) -> FieldMap:
        """Fields of a post; leave blank for the current post in context."""
        return self.resolve(PostKey(post_id))

    def get_comment_fields(self, comment: Any) -> FieldMap:
        """Fields of a comment, given its id or ``Comment`` object."""
        return self.resolve(CommentKey(comment))

    def get_attachment_fields(self, attachment_id: int) -> FieldMap:
        """Fields of a media attachment, by attachment id."""
        return self.resolve(AttachmentKey(attachment_id))

    def get_taxonomy_fields(self, term: Any) -> FieldMap:
        """
        Fields of a taxonomy term.

        Args:
            term: A ``Term`` or a ``[taxonomy, term_id]`` sequence

        Raises:
            InvalidArgumentError: If ``term`` is neither
        """
        return self.resolve(TermKey(term))

    def get_user_fields(self, user_id: Union[int, str]) -> FieldMap:
        """Fields of a user profile, by user id."""
        return self.resolve(UserKey(user_id))

    def get_widget_fields(self, widget_id: Union[int, str]) -> FieldMap:
        """Fields of a widget, by widget id (e.g. ``"text-2"``)."""
        return self.resolve(WidgetKey(widget_id))

    def get_option_fields(self, *_: Any) -> FieldMap:
        """Site-wide option fields. Options have no id; arguments are ignored."""
        return self.resolve(OptionKey())

    def get_fields(self, kind: str, ident: Optional[Any] = None) -> FieldMap:
        """Lookup by entity kind name ("post", "comment", "taxonomy", ...)."""
        return self.resolve(entity_key_for(kind, ident))
