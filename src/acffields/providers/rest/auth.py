from __future__ import annotations

from typing import Generator, Optional

import httpx

from acffields.providers.rest.types import RestAuth


class JwtAuth(httpx.Auth):
    """Bearer token auth as expected by the WordPress JWT authentication plugins."""

    def __init__(self, token: str):
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def build_auth(auth: RestAuth) -> Optional[httpx.Auth]:
    """Translate a RestAuth into the httpx auth used by the REST client."""
    if auth.kind == "none":
        return None

    if auth.kind == "application_password":
        if not auth.username or not auth.password:
            raise ValueError("application_password auth requires username and password")
        # WordPress displays application passwords in space-separated groups.
        return httpx.BasicAuth(auth.username, auth.password.replace(" ", ""))

    if auth.kind == "jwt":
        if not auth.token:
            raise ValueError("jwt auth requires token")
        return JwtAuth(auth.token)

    raise ValueError(f"Unsupported auth kind: {auth.kind!r}")
