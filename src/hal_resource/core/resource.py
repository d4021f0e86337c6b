from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ..models import Link
from . import mutation, paths, resolver
from .config import create_transport_from_env, load_env_credentials
from .errors import HALModelValidationError
from .links import LinkTable
from .transport import Credentials, HALTransport

T = TypeVar("T", bound=BaseModel)


class HALResource:
    """
    In-memory handle on one remote HAL resource: address, credentials, content.

    A handle starts unbound (empty content), is filled by get(), and after a
    successful post/put/patch it becomes whatever resource the server's
    `self` link names. delete() is terminal by convention only.
    """

    def __init__(
        self,
        url: Union[str, httpx.URL],
        *,
        credentials: Optional[Credentials] = None,
        content: Optional[Dict[str, Any]] = None,
        transport: Optional[HALTransport] = None,
    ):
        location = httpx.URL(url)
        if not location.is_absolute_url:
            raise ValueError(f"Resource URL must be absolute, got {str(url)!r}")

        self._location = location
        self._credentials = credentials
        self.content: Dict[str, Any] = content if content is not None else {}

        self._owns_transport = transport is None
        self.transport = transport or HALTransport()

    @classmethod
    def from_env(cls, url: Union[str, httpx.URL], **kwargs: Any) -> "HALResource":
        """Build a handle whose transport and credentials come from HAL_* env vars."""
        return cls(
            url,
            credentials=load_env_credentials(),
            transport=create_transport_from_env(**kwargs),
        )

    def __repr__(self) -> str:
        return f"<HALResource {self.href}>"

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self) -> "HALResource":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # --- Identity ---------------------------------------------------------- #

    @property
    def location(self) -> httpx.URL:
        return self._location

    @property
    def href(self) -> str:
        return str(self._location)

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    def resolve_href(self, href: Union[str, httpx.URL]) -> str:
        return str(self._location.join(href))

    def rebind(self, href: Union[str, httpx.URL]) -> None:
        """Point the handle at `href`, resolved against the current location."""
        self._location = self._location.join(href)

    def spawn(self, href: Union[str, httpx.URL]) -> "HALResource":
        """Child handle sharing this handle's credentials and transport."""
        return HALResource(
            self.resolve_href(href),
            credentials=self._credentials,
            transport=self.transport,
        )

    # --- Content ----------------------------------------------------------- #

    def body(self, content: Dict[str, Any]) -> "HALResource":
        self.content = content
        return self

    @property
    def links(self) -> LinkTable:
        return LinkTable(self.content)

    def link(self, relation: str) -> Link:
        return self.links.get(relation)

    def embedded(self, path: str) -> Any:
        """
        Deep value retrieval from embedded items, in dot notation.
        'statuses.2.numericValue' looks under embedded `statuses`, takes the
        third item and finally its `numericValue` field.
        """
        return paths.lookup(self.content.get("_embedded", {}), path)

    def as_model(self, model: Type[T]) -> T:
        try:
            return model.model_validate(self.content)
        except ValidationError as exc:
            raise HALModelValidationError(
                f"Content of {self.href} did not match model {model.__name__}: {exc}"
            ) from exc

    # --- Operations -------------------------------------------------------- #

    async def get(self, depth: int = 0) -> "HALResource":
        """
        Fetch the resource and embed linked resources `depth` levels deep.
        Keep depth small: only self-links are guarded against cycles.
        """
        return await resolver.resolve(self, depth)

    async def mutate(
        self, method: str, headers: Optional[Mapping[str, str]] = None
    ) -> "HALResource":
        return await mutation.mutate(self, method, headers)

    async def post(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> "HALResource":
        return await mutation.mutate(self, "POST", headers)

    async def put(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> "HALResource":
        return await mutation.mutate(self, "PUT", headers)

    async def patch(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> "HALResource":
        return await mutation.mutate(self, "PATCH", headers)

    async def delete(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> "HALResource":
        return await mutation.delete(self, headers)

    async def follow(self, relation: str, depth: int = 0) -> "HALResource":
        return await mutation.follow(self, relation, depth)

    async def associate(self, relation_name: str, target_url: str) -> "HALResource":
        return await mutation.associate(self, relation_name, target_url)


__all__ = ["HALResource"]
