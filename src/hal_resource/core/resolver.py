"""
Recursive resolution of linked resources into `_embedded`.

Each followed link gets its own child handle; siblings are fetched
concurrently and joined before the parent is touched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .errors import InvalidDepth, ServerRejected
from .links import LinkTable
from .observability import log_event

if TYPE_CHECKING:
    from .resource import HALResource

log = logging.getLogger("hal_resource.resolver")

Target = Tuple[str, Optional[int], "HALResource"]


def followable(resource: "HALResource") -> List[Target]:
    """
    Child handles for every link worth following.
    Self-references and templated links are skipped.
    """
    targets: List[Target] = []
    for relation, index, link in LinkTable(resource.content).entries():
        if link.templated:
            continue
        # Do not follow links which point to self!
        if resource.resolve_href(link.href) == resource.href:
            continue
        targets.append((relation, index, resource.spawn(link.href)))
    return targets


def unwrap(relation: str, content: Dict[str, Any]) -> Any:
    """
    Promote content["_embedded"][relation] when the child already embeds
    something under the relation it is being embedded as.
    """
    embedded = content.get("_embedded")
    if isinstance(embedded, dict) and relation in embedded:
        return embedded[relation]
    return content


async def fetch(resource: "HALResource") -> Dict[str, Any]:
    response = await resource.transport.request(
        "GET", resource.href, auth=resource.credentials
    )
    if response.is_error:
        raise ServerRejected.from_response(response)
    return response.body


async def embed_links(resource: "HALResource", depth: int) -> Dict[str, Any]:
    targets = followable(resource)
    log.debug(
        "hal.fan_out",
        extra={"url": resource.href, "depth": depth, "links": len(targets)},
    )

    results = await asyncio.gather(
        *(child.get(depth - 1) for _, _, child in targets),
        return_exceptions=True,
    )
    # Every branch has finished; surface the first failure in link order.
    for result in results:
        if isinstance(result, BaseException):
            raise result

    embedded: Dict[str, Any] = {}
    for relation, index, child in targets:
        value = unwrap(relation, child.content)
        if index is None:
            embedded[relation] = value
        else:
            embedded.setdefault(relation, []).append(value)
    return embedded


async def resolve(resource: "HALResource", depth: int = 0) -> "HALResource":
    """
    GET the resource, then embed every non-self link up to `depth` levels.

    depth counts link-following levels beyond the initial fetch: 0 means no
    embedding at all. Cycles other than self-links (A -> B -> A) are not
    detected; they stop only when depth runs out.
    """
    if depth < 0:
        raise InvalidDepth(depth)

    body = await fetch(resource)
    resource.content = body

    if depth == 0:
        return resource

    embedded = await embed_links(resource, depth)
    existing = body.get("_embedded")
    merged = dict(existing) if isinstance(existing, dict) else {}
    merged.update(embedded)
    resource.content["_embedded"] = merged

    log_event(
        "hal.resolved",
        url=resource.href,
        depth=depth,
        links=len(embedded),
    )
    return resource


__all__ = ["resolve", "followable", "unwrap", "fetch", "embed_links"]
