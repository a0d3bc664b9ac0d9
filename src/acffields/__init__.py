"""acffields.

Read every custom field value attached to a CMS entity (post, comment,
attachment, taxonomy term, user, widget or site options) as a flat mapping,
with each value passed through an injectable transform chain.

Public API for applications embedding the reader.
"""

from acffields.core.contracts import Comment, FieldMap, FieldObject, Term
from acffields.core.entity_keys import (
    AttachmentKey,
    CommentKey,
    EntityKey,
    OptionKey,
    PostKey,
    TermKey,
    UserKey,
    WidgetKey,
)
from acffields.core.exceptions import (
    AcfFieldsException,
    ConfigError,
    InvalidArgumentError,
    ProviderError,
    ProviderErrorPolicy,
)
from acffields.core.field_provider import FieldProvider, is_provider_active
from acffields.factory import build_reader
from acffields.providers.file_provider import FileFieldProvider
from acffields.providers.memory import InMemoryFieldProvider
from acffields.reader import FieldReader
from acffields.transforms import DEFAULT_HOOK_NAME, TransformChain

__version__ = "0.1.0"

__all__ = [
    "AcfFieldsException",
    "AttachmentKey",
    "Comment",
    "CommentKey",
    "ConfigError",
    "DEFAULT_HOOK_NAME",
    "EntityKey",
    "FieldMap",
    "FieldObject",
    "FieldProvider",
    "FieldReader",
    "FileFieldProvider",
    "InMemoryFieldProvider",
    "InvalidArgumentError",
    "OptionKey",
    "PostKey",
    "ProviderError",
    "ProviderErrorPolicy",
    "Term",
    "TermKey",
    "TransformChain",
    "UserKey",
    "WidgetKey",
    "build_reader",
    "is_provider_active",
]
