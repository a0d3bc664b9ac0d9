from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional

# Built-in taxonomies whose REST base differs from the taxonomy name
DEFAULT_TAXONOMY_ROUTES: Dict[str, str] = {"category": "categories", "post_tag": "tags"}


@dataclass(frozen=True)
class RestAuth:
    kind: Literal["none", "application_password", "jwt"] = "none"

    # WordPress application password (Users > Profile), sent as basic auth
    username: Optional[str] = None
    password: Optional[str] = None

    # Token issued by a JWT authentication plugin
    token: Optional[str] = None


@dataclass(frozen=True)
class RestConnection:
    base_url: str                               # Site root, e.g. https://example.org/wp-json
    timeout_seconds: float = 30.0
    headers: Dict[str, str] = field(default_factory=dict)
    auth: RestAuth = field(default_factory=RestAuth)
    namespace: str = "acf/v3"
    posts_route: str = "posts"                  # Route for bare numeric ids (posts, attachments)
    taxonomy_routes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TAXONOMY_ROUTES))
