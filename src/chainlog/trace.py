from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from chainlog.caller import CallerInfo


@dataclass(frozen=True)
class TraceLink:
    """
    One parent -> child edge created by ``Logger.child(..., trace=True)``.

    ``inherited`` points at the parent's own link, so the links form an
    immutable chain towards the oldest traced ancestor.
    """

    parent_prefix: str | None
    parent_created: CallerInfo
    child_created: CallerInfo
    inherited: TraceLink | None = None

    def iter_links(self) -> Iterator[TraceLink]:
        link: TraceLink | None = self
        while link is not None:
            yield link
            link = link.inherited


def format_link(link: TraceLink) -> str:
    return (
        f"Trace: Parent created at {link.parent_created.location}, "
        f"Child created at {link.child_created.location}"
    )


def render_trace(link: TraceLink | None) -> list[str]:
    """Trace lines for the whole chain, oldest ancestor first."""
    if link is None:
        return []
    lines = [format_link(item) for item in link.iter_links()]
    lines.reverse()
    return lines


__all__ = ["TraceLink", "format_link", "render_trace"]
