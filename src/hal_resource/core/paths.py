"""
Dot-path addressing into embedded trees.

'statuses.1.numericValue' reads as: the `statuses` relation, its second
item, then that item's `numericValue` field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence, Tuple, Union

from .errors import MissingKey, OutOfBounds


@dataclass(frozen=True)
class Index:
    position: int

    def __str__(self) -> str:
        return str(self.position)


@dataclass(frozen=True)
class Field:
    name: str

    def __str__(self) -> str:
        return self.name


PathSegment = Union[Index, Field]


def parse_path(path: str) -> Tuple[PathSegment, ...]:
    if not path:
        raise ValueError("Embedded path must not be empty.")
    return tuple(
        Index(int(part)) if part.isdecimal() else Field(part)
        for part in path.split(".")
    )


def _format(segments: Iterable[PathSegment]) -> str:
    return ".".join(str(s) for s in segments)


def _step(node: Any, segment: PathSegment, path: str) -> Any:
    is_array = isinstance(node, Sequence) and not isinstance(node, (str, bytes))
    if isinstance(segment, Index) and is_array:
        if segment.position >= len(node):
            raise OutOfBounds(
                f"Index {segment.position} out of range at {path!r} "
                f"(length {len(node)})",
                path=path,
                segment=segment,
            )
        return node[segment.position]

    if isinstance(node, Mapping):
        key = str(segment)
        if key in node:
            return node[key]

    raise MissingKey(
        f"No entry {str(segment)!r} at {path!r}", path=path, segment=segment
    )


def walk(root: Any, segments: Sequence[PathSegment]) -> Any:
    node = root
    for depth, segment in enumerate(segments):
        node = _step(node, segment, _format(segments[: depth + 1]))
    return node


def lookup(root: Any, path: str) -> Any:
    return walk(root, parse_path(path))


__all__ = ["Index", "Field", "PathSegment", "parse_path", "walk", "lookup"]
