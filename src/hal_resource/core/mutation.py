from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from .errors import InvalidDepth, InvalidMethod, ServerRejected
from .links import LinkTable
from .observability import log_event
from .resolver import resolve

if TYPE_CHECKING:
    from .resource import HALResource

# Methods meant for data modification; they share the same pipeline.
MUTATING_METHODS = ("POST", "PUT", "PATCH")


async def mutate(
    resource: "HALResource",
    method: str,
    headers: Optional[Mapping[str, str]] = None,
    *,
    body: Optional[Dict[str, Any]] = None,
) -> "HALResource":
    """
    Core of POST, PUT and PATCH.
    - Sends `body` (defaults to the handle's content)
    - Merges the server response under the submitted fields (local wins)
    - Re-binds the handle to the merged `self` link
    The handle is only updated once both the merge and the re-bind succeed.
    """
    verb = (method or "").upper()
    if verb not in MUTATING_METHODS:
        raise InvalidMethod(method, MUTATING_METHODS)

    submitted = resource.content if body is None else body
    response = await resource.transport.request(
        verb,
        resource.href,
        headers=headers,
        auth=resource.credentials,
        json=submitted or None,
    )
    if response.is_error:
        raise ServerRejected.from_response(response)

    merged = {**response.body, **submitted}
    self_link = LinkTable(merged).get("self")
    location = resource.resolve_href(self_link.href)

    resource.content = merged
    resource.rebind(location)

    log_event(
        "hal.mutated",
        method=verb,
        url=resource.href,
        status=response.status_code,
    )
    return resource


async def delete(
    resource: "HALResource", headers: Optional[Mapping[str, str]] = None
) -> "HALResource":
    """DELETE the resource; the handle keeps its last known content and URL."""
    response = await resource.transport.request(
        "DELETE",
        resource.href,
        headers=headers,
        auth=resource.credentials,
        expect_json=False,
    )
    if response.is_error:
        raise ServerRejected.from_response(response)

    log_event(
        "hal.deleted", method="DELETE", url=resource.href, status=response.status_code
    )
    return resource


async def follow(
    resource: "HALResource", relation: str, depth: int = 0
) -> "HALResource":
    if depth < 0:
        raise InvalidDepth(depth)
    link = LinkTable(resource.content).get(relation)
    resource.rebind(link.href)
    return await resolve(resource, depth)


async def associate(
    resource: "HALResource", relation_name: str, target_url: str
) -> "HALResource":
    """
    Associate the resource with `target_url` under `relation_name`.

    NOTE: this PATCHes a plain field holding the target URI, which is how
    Spring Data REST backends link two resources. Other HAL servers may
    expect association changes through `_links` or a dedicated endpoint.
    """
    return await mutate(resource, "PATCH", body={relation_name: target_url})


__all__ = ["MUTATING_METHODS", "mutate", "delete", "follow", "associate"]
