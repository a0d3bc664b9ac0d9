from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, Field, PositiveFloat, model_validator

from acffields.providers.rest.types import DEFAULT_TAXONOMY_ROUTES


# -----------------
# REST auth
# -----------------


class RestAuthNoneConfig(BaseModel):
    kind: Literal["none"] = "none"


class RestAuthApplicationPasswordConfig(BaseModel):
    """WordPress application password, sent as basic auth."""

    kind: Literal["application_password"] = "application_password"

    username: str
    password: str


class RestAuthJwtConfig(BaseModel):
    """Bearer token from a WordPress JWT authentication plugin."""

    kind: Literal["jwt"] = "jwt"

    token: str


RestAuthConfig = Annotated[
    Union[
        RestAuthNoneConfig,
        RestAuthApplicationPasswordConfig,
        RestAuthJwtConfig,
    ],
    Field(discriminator="kind"),
]


# -----------------
# Providers
# -----------------


class MemoryProviderConfig(BaseModel):
    kind: Literal["memory"] = "memory"

    # storage key -> {field name: value or {"value": ..., "type": ...}}
    fields: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class FileProviderConfig(BaseModel):
    kind: Literal["file"] = "file"

    path: str

    @model_validator(mode="after")
    def _validate_suffix(self) -> "FileProviderConfig":
        if not self.path.endswith((".json", ".yaml", ".yml")):
            raise ValueError("file provider path must end in .json, .yaml or .yml")
        return self


class RestProviderConfig(BaseModel):
    kind: Literal["rest"] = "rest"

    base_url: str
    timeout_seconds: PositiveFloat = 30.0
    headers: Dict[str, str] = Field(default_factory=dict)
    auth: RestAuthConfig = Field(default_factory=RestAuthNoneConfig)

    namespace: str = "acf/v3"
    posts_route: str = "posts"
    # taxonomy name -> REST base, for taxonomies whose base differs from the name
    taxonomy_routes: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TAXONOMY_ROUTES))


ProviderConfig = Annotated[
    Union[MemoryProviderConfig, FileProviderConfig, RestProviderConfig],
    Field(discriminator="kind"),
]