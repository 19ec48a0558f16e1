"""Rewrite trace - records which algebra rules fired.

Trace is runtime infrastructure: it never influences the expressions
being built. A rule that rewrites sub-expressions opens a span, and the
rules fired inside it are recorded as its children.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded rewrite event.

    Attributes:
        action: Rule name, e.g. "compose.zero" or "compose.sum_left"
        id: Sequential event id within its trace
        parent_id: Id of the enclosing span, None for a root event
        timestamp: When the event was recorded
        info: Extra context such as the spaces involved
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)

    def matches(self, **query: Any) -> bool:
        """True if every query key equals an ``info`` entry or, failing that, an attribute."""
        for key, expected in query.items():
            if key in self.info:
                if self.info[key] != expected:
                    return False
            elif not hasattr(self, key) or getattr(self, key) != expected:
                return False
        return True


class Trace:
    """Ordered log of rewrite events with span nesting.

    A disabled trace records nothing; ``span`` still runs its body.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def record(self, action: str, **info: Any) -> int | None:
        """Record a leaf event under the innermost open span.

        Returns:
            Event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None
        event = Evidence(
            action=action,
            id=len(self._events),
            parent_id=self._open[-1] if self._open else None,
            info=info,
        )
        self._events.append(event)
        return event.id

    @contextmanager
    def span(self, action: str, **info: Any) -> Iterator[int | None]:
        """Record ``action`` and nest everything recorded inside the block under it."""
        event_id = self.record(action, **info)
        if event_id is None:
            yield None
            return
        self._open.append(event_id)
        try:
            yield event_id
        finally:
            self._open.pop()

    @property
    def depth(self) -> int:
        """Number of currently open spans."""
        return len(self._open)

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, **query: Any) -> list[Evidence]:
        """Events matching ``query``; see ``Evidence.matches``."""
        return [e for e in self._events if e.matches(**query)]

    def roots(self) -> list[Evidence]:
        return [e for e in self._events if e.parent_id is None]

    def children(self, event_id: int) -> list[Evidence]:
        return [e for e in self._events if e.parent_id == event_id]

    def actions(self) -> list[str]:
        """Rule names in firing order."""
        return [e.action for e in self._events]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for e in self._events:
            tree.setdefault(e.parent_id, []).append(e.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Evidence]:
        return iter(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open.clear()
