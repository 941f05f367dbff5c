"""Traversal path tracking for error attribution."""

import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

PathSegment = str | int
FieldPath = tuple[PathSegment, ...]

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class PathTracker:
    """Stack of field names and array indices for the node being validated."""

    def __init__(self) -> None:
        self._segments: list[PathSegment] = []

    @property
    def current(self) -> FieldPath:
        """Path of the node being validated."""
        return tuple(self._segments)

    def at(self, *extra: PathSegment) -> FieldPath:
        """Current path extended by ``extra`` without pushing it."""
        return (*self._segments, *extra)

    @contextmanager
    def enter(self, segment: PathSegment) -> Iterator[None]:
        """
        Descend one level for the duration of the block.

        The segment is popped on exit even if the block raises, so siblings
        always start from the parent path.
        """
        self._segments.append(segment)
        try:
            yield
        finally:
            self._segments.pop()

    def __len__(self) -> int:
        return len(self._segments)


def render_path(path: Sequence[PathSegment]) -> str:
    """
    Render a path as an accessor string.

    ``("tools", 1, "inputs")`` becomes ``tools[1].inputs``. Keys that are
    not plain identifiers use bracket form, e.g. ``properties["a b"]``.
    """
    if not path:
        return "<root>"

    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif _IDENTIFIER.match(segment):
            parts.append(f".{segment}" if parts else segment)
        else:
            escaped = segment.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'["{escaped}"]')
    return "".join(parts)
