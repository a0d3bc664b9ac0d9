from __future__ import annotations

import re
from typing import Any, Dict, Optional

import httpx

from acffields.core.contracts import Comment, FieldObject, Term
from acffields.core.entity_keys import StorageKey
from acffields.core.exceptions import ProviderError
from acffields.core.logger import get_logger
from acffields.providers.registry import register_provider
from acffields.providers.rest.auth import build_auth
from acffields.providers.rest.types import RestAuth, RestConnection

logger = get_logger(__name__)

# Storage key prefix -> (acf/v3 route, id pattern). Anything else with an
# underscore is read as "{taxonomy}_{term_id}".
_PREFIXED_ROUTES = (
    ("comment_", "comments", re.compile(r"\d+")),
    ("user_", "users", re.compile(r"\d+")),
    ("widget_", "widgets", re.compile(r"(?:[a-z0-9_]+-)?\d+")),  # e.g. text-2
)


@register_provider(kind="rest")
class RestFieldProvider:
    """Field provider backed by the "ACF to REST API" routes of a WordPress site.

    Each lookup issues ``GET {base_url}/{namespace}/{route}/{id}`` and reads the
    ``acf`` member of the response. A 404 (or ``"acf": false``) means the
    entity has no fields.
    """

    def __init__(
        self,
        connection: RestConnection,
        *,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.connection = connection

        self._client = client or httpx.Client(
            base_url=connection.base_url,
            timeout=connection.timeout_seconds,
            headers=dict(connection.headers),
            auth=build_auth(connection.auth),
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: Any) -> "RestFieldProvider":
        auth = config.auth
        connection = RestConnection(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            headers=dict(config.headers),
            auth=RestAuth(**auth.model_dump()),
            namespace=config.namespace,
            posts_route=config.posts_route,
            taxonomy_routes=dict(config.taxonomy_routes),
        )
        return cls(connection)

    def endpoint_for(self, key: StorageKey) -> Optional[str]:
        """Map a storage key onto its REST endpoint; None when it has no remote form."""
        route = self._route_for(key)
        if route is None:
            return None
        return f"/{self.connection.namespace.strip('/')}/{route}"

    def _route_for(self, key: StorageKey) -> Optional[str]:
        if isinstance(key, Comment):
            return f"comments/{key.comment_id}"
        if isinstance(key, Term):
            return self._term_route(key.taxonomy, key.term_id)
        if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
            # Post 0 means "current post in context", which only exists inside the host.
            if int(key) == 0:
                return None
            return f"{self.connection.posts_route}/{key}"
        if key in ("option", "options"):
            return "options/options"
        for prefix, route, id_pattern in _PREFIXED_ROUTES:
            ident = key[len(prefix):]
            if key.startswith(prefix) and id_pattern.fullmatch(ident):
                return f"{route}/{ident}"
        taxonomy, sep, term_id = key.rpartition("_")
        if sep and taxonomy and term_id.isdigit():
            return self._term_route(taxonomy, term_id)
        return None

    def _term_route(self, taxonomy: str, term_id: Any) -> str:
        return f"{self.connection.taxonomy_routes.get(taxonomy, taxonomy)}/{term_id}"

    def get_field_objects(self, key: StorageKey) -> Optional[Dict[str, FieldObject]]:
        endpoint = self.endpoint_for(key)
        if endpoint is None:
            logger.debug(f"No REST endpoint for storage key {key!r}")
            return None

        try:
            resp = self._client.request("GET", endpoint)
        except httpx.HTTPError as e:
            raise ProviderError(f"Request to {endpoint} failed: {e}") from e

        if resp.status_code == 404:
            return None

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"Field lookup at {endpoint} returned HTTP {resp.status_code}") from e

        try:
            payload: Any = resp.json()
        except Exception as e:
            response_text = resp.text[:500]
            content_type = resp.headers.get("content-type", "unknown")
            raise ProviderError(
                f"Failed to parse field response as JSON. "
                f"Status: {resp.status_code}, Content-Type: {content_type}. "
                f"Response preview: {response_text}"
            ) from e

        acf = payload.get("acf") if isinstance(payload, dict) else None
        if not acf:
            return None
        if not isinstance(acf, dict):
            raise ProviderError(f"Unexpected 'acf' payload at {endpoint}: {type(acf).__name__}")

        return {name: FieldObject(value=value, name=name) for name, value in acf.items()}

    def close(self) -> None:
        self._client.close()
