from acffields.providers.rest.provider import RestFieldProvider
from acffields.providers.rest.types import RestAuth, RestConnection

__all__ = ["RestAuth", "RestConnection", "RestFieldProvider"]
