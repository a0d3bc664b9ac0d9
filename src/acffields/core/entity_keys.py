"""
Entity references for field lookups.

Each lookup is described by one of the key classes below. The provider's
storage namespace wants a single flat key (``"user_42"``, ``"category_7"``,
``"option"``...); that encoding lives in ``encode_storage_key`` and is only
applied at the provider boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Optional, Union

from acffields.core.contracts import Comment, Term
from acffields.core.exceptions import InvalidArgumentError

StorageKey = Union[int, str, Comment, Term]


@dataclass(frozen=True)
class PostKey:
    kind: ClassVar[str] = "post"

    post_id: int = 0  # 0 = current post in context


@dataclass(frozen=True)
class CommentKey:
    kind: ClassVar[str] = "comment"

    comment: Union[int, str, Comment]


@dataclass(frozen=True)
class AttachmentKey:
    kind: ClassVar[str] = "attachment"

    attachment_id: int


@dataclass(frozen=True)
class TermKey:
    kind: ClassVar[str] = "taxonomy"

    term: Any

    def __post_init__(self) -> None:
        if isinstance(self.term, Term):
            return
        if _is_pair(self.term):
            # Freeze list input so the key stays hashable and unchanged after the call.
            object.__setattr__(self, "term", tuple(self.term))
            return
        raise InvalidArgumentError(
            "term must be either a Term or a [taxonomy, term_id] sequence",
            details={"term": self.term},
        )


@dataclass(frozen=True)
class UserKey:
    kind: ClassVar[str] = "user"

    user_id: Union[int, str]


@dataclass(frozen=True)
class WidgetKey:
    kind: ClassVar[str] = "widget"

    widget_id: Union[int, str]


@dataclass(frozen=True)
class OptionKey:
    kind: ClassVar[str] = "option"


EntityKey = Union[PostKey, CommentKey, AttachmentKey, TermKey, UserKey, WidgetKey, OptionKey]


def _is_pair(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and len(value) >= 2


def encode_storage_key(key: EntityKey) -> StorageKey:
    """Translate an entity key into the provider's storage key."""
    if isinstance(key, PostKey):
        return key.post_id
    if isinstance(key, CommentKey):
        if isinstance(key.comment, Comment):
            return key.comment
        return f"comment_{key.comment}"
    if isinstance(key, AttachmentKey):
        return key.attachment_id
    if isinstance(key, TermKey):
        if isinstance(key.term, Term):
            return key.term
        return f"{key.term[0]}_{key.term[1]}"
    if isinstance(key, UserKey):
        return f"user_{key.user_id}"
    if isinstance(key, WidgetKey):
        return f"widget_{key.widget_id}"
    if isinstance(key, OptionKey):
        return "option"
    raise InvalidArgumentError("Unsupported entity key", details={"key": key})


def flatten_storage_key(storage_key: StorageKey) -> str:
    """Collapse a storage key onto the string form used by flat stores."""
    if isinstance(storage_key, Comment):
        return f"comment_{storage_key.comment_id}"
    if isinstance(storage_key, Term):
        return f"{storage_key.taxonomy}_{storage_key.term_id}"
    return str(storage_key)


def _parse_term(ident: Any) -> Any:
    # "category:7" on the command line
    if isinstance(ident, str) and ":" in ident:
        return ident.split(":", 1)
    return ident


_KEY_BUILDERS: Dict[str, Callable[[Any], EntityKey]] = {
    PostKey.kind: lambda ident: PostKey(0 if ident is None else ident),
    CommentKey.kind: CommentKey,
    AttachmentKey.kind: AttachmentKey,
    TermKey.kind: lambda ident: TermKey(_parse_term(ident)),
    UserKey.kind: UserKey,
    WidgetKey.kind: WidgetKey,
    OptionKey.kind: lambda ident: OptionKey(),
}

ENTITY_KINDS = tuple(_KEY_BUILDERS)


def entity_key_for(kind: str, ident: Optional[Any] = None) -> EntityKey:
    """Build the entity key for ``kind`` ("post", "comment", "taxonomy", ...)."""
    try:
        builder = _KEY_BUILDERS[kind]
    except KeyError as exc:
        raise InvalidArgumentError(
            f"Unknown entity kind {kind!r}", details={"known": list(ENTITY_KINDS)}
        ) from exc
    if ident is None and kind not in (PostKey.kind, OptionKey.kind):
        raise InvalidArgumentError(f"An identifier is required for {kind!r} lookups")
    return builder(ident)
