from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """
    A link object. Only `href` is strict; servers put all sorts of values in
    the descriptive fields, so those are carried as-is.
    """

    href: str
    templated: Optional[bool] = False
    title: Any = None
    name: Any = None
    type: Any = None

    model_config = ConfigDict(extra="allow")


class HALDocument(BaseModel):
    """
    Base model for HAL+JSON resource content.
    _links/_embedded stay loosely typed because servers mix:
      - single link objects
      - arrays of link objects
      - resolved resources or nested embeds under _embedded
    Subclass it and pass the subclass to HALResource.as_model().
    """

    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    embedded: Dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def _link(self, rel: str) -> Optional[Dict[str, Any]]:
        value = self.links.get(rel)
        if isinstance(value, list):
            value = value[0] if value else None
        return value if isinstance(value, dict) else None

    def link_href(self, rel: str) -> Optional[str]:
        link = self._link(rel)
        return link.get("href") if link else None

    def link_title(self, rel: str) -> Optional[str]:
        link = self._link(rel)
        return link.get("title") if link else None

    def embedded_raw(self, rel: str) -> Optional[Dict[str, Any]]:
        value = self.embedded.get(rel)
        return value if isinstance(value, dict) else None


__all__ = ["Link", "HALDocument"]
