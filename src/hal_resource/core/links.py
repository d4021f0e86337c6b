from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..models import Link
from .errors import MissingLink

LinkValue = Union[str, Mapping[str, Any], Link]


def _section(payload: Optional[Dict[str, Any]], key: str) -> Dict[str, Any]:
    # `_links: null` and other non-object values count as absent
    value = payload.get(key) if payload else None
    return value if isinstance(value, dict) else {}


def get_link(payload: Dict[str, Any], relation: str) -> Optional[Dict[str, Any]]:
    """
    Safely retrieves a link object from the _links dictionary.
    Array-valued relations yield their first entry.
    """
    link = _section(payload, "_links").get(relation)
    if isinstance(link, list):
        link = link[0] if link else None
    return link if isinstance(link, dict) else None


def get_link_href(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Extracts the 'href' (URL) from a specific link relation.
    Example: get_link_href(order_json, 'customer') -> '/customers/7'
    """
    link = get_link(payload, relation)
    return link.get("href") if link else None


def get_link_title(payload: Dict[str, Any], relation: str) -> Optional[str]:
    link = get_link(payload, relation)
    return link.get("title") if link else None


def get_embedded(payload: Dict[str, Any], relation: str) -> Any:
    """
    Extracts an embedded resource from the _embedded dictionary.
    Example: get_embedded(order_json, 'customer') -> {'id': 7, 'name': ...}
    """
    return _section(payload, "_embedded").get(relation)


def _to_link(relation: str, raw: Any) -> Link:
    try:
        return Link.model_validate(raw)
    except ValidationError as exc:
        raise MissingLink(
            relation, f"Link {relation!r} is not a usable link object"
        ) from exc


class LinkTable:
    """Accessor over the `_links` relation map of a resource's content."""

    def __init__(self, content: Dict[str, Any]):
        self._content = content

    @property
    def _links(self) -> Dict[str, Any]:
        return _section(self._content, "_links")

    def __contains__(self, relation: object) -> bool:
        return relation in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._links))

    def __len__(self) -> int:
        return len(self._links)

    def get(self, relation: str) -> Link:
        if not isinstance(self._content.get("_links"), dict):
            raise MissingLink(
                relation, f"Resource has no _links (wanted {relation!r})"
            )
        raw = get_link(self._content, relation)
        if raw is None:
            raise MissingLink(relation)
        return _to_link(relation, raw)

    def get_all(self, relation: str) -> List[Link]:
        raw = self._links.get(relation)
        if raw is None:
            raise MissingLink(relation)
        items = raw if isinstance(raw, list) else [raw]
        return [_to_link(relation, item) for item in items]

    def set(self, relation: str, value: LinkValue) -> None:
        if isinstance(value, str):
            link: Any = {"href": value}
        elif isinstance(value, Link):
            link = value.model_dump(exclude_none=True, exclude_defaults=True)
            link["href"] = value.href
        else:
            link = dict(value)
        if not isinstance(self._content.get("_links"), dict):
            self._content["_links"] = {}
        self._content["_links"][relation] = link

    def entries(self) -> Iterator[Tuple[str, Optional[int], Link]]:
        """
        Yield (relation, index, link) for every link object carrying an href.
        index is None for single links and the array position otherwise.
        """
        for relation, raw in list(self._links.items()):
            if isinstance(raw, list):
                for index, item in enumerate(raw):
                    if isinstance(item, dict) and isinstance(item.get("href"), str):
                        yield relation, index, _to_link(relation, item)
            elif isinstance(raw, dict) and isinstance(raw.get("href"), str):
                yield relation, None, _to_link(relation, raw)


__all__ = [
    "LinkTable",
    "LinkValue",
    "get_link",
    "get_link_href",
    "get_link_title",
    "get_embedded",
]
