"""
Pending edits layered on top of immutable source documents.

An EditStore keeps at most one pending edit per (side, key path). The
source document passed in is never mutated: materialize() always works
on a deep copy and the result is cached until the side's edits change.

Usage:
    store = EditStore()
    store.record_edit("left", "app.welcome", "Bienvenue", EditKind.ADD)
    edited = store.materialize("left", original)
"""

from __future__ import annotations

import copy
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from catalog_compare.engine import key_path as kp
from catalog_compare.engine.models import EditKind, EditRecord, Side, coerce_side

logger = logging.getLogger(__name__)


@dataclass
class _Materialized:
    """Cached materialization of one side."""

    source: dict[str, Any]
    document: dict[str, Any]
    stale: bool = False


class EditStore:
    """Per-session store of pending edits for the left and right documents."""

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        """Initialize an empty store.

        Args:
            clock: Source of timestamps. Timestamps handed out by the store
                are forced to be strictly increasing even if the clock is not.
        """
        self._clock = clock
        self._last_timestamp = 0
        self._edits: dict[Side, dict[str, EditRecord]] = {Side.LEFT: {}, Side.RIGHT: {}}
        self._materialized: dict[Side, _Materialized | None] = {Side.LEFT: None, Side.RIGHT: None}

    def _next_timestamp(self) -> int:
        self._last_timestamp = max(self._clock(), self._last_timestamp + 1)
        return self._last_timestamp

    def record_edit(
        self,
        side: Side | str,
        key_path: str,
        new_value: Any,
        kind: EditKind | str = EditKind.MODIFY,
        timestamp: int | None = None,
    ) -> EditRecord:
        """Record (or replace) the pending edit for ``key_path`` on ``side``.

        Args:
            side: 'left' or 'right'.
            key_path: Dotted path of the edited key.
            new_value: Value to write (ignored for deletions).
            kind: EditKind of the edit.
            timestamp: Explicit timestamp; defaults to the store's clock.

        Returns:
            The edit now pending for (side, key_path). When ``timestamp`` is
            older than the pending edit's, the pending edit wins and is
            returned unchanged.

        Raises:
            InvalidSideError: If side is not 'left' or 'right'.
        """
        side = coerce_side(side)
        kind = EditKind(kind)
        if timestamp is None:
            timestamp = self._next_timestamp()
        else:
            self._last_timestamp = max(self._last_timestamp, timestamp)

        edits = self._edits[side]
        existing = edits.get(key_path)
        if existing is not None and existing.timestamp > timestamp:
            logger.debug("Ignoring stale %s edit of %s on %s", kind.value, key_path, side.value)
            return existing

        edit = EditRecord(
            side=side,
            key_path=key_path,
            new_value=new_value,
            kind=kind,
            timestamp=timestamp,
        )
        edits[key_path] = edit
        self._mark_stale(side)
        logger.debug("Recorded %s edit of %s on %s", kind.value, key_path, side.value)
        return edit

    def _mark_stale(self, side: Side) -> None:
        cached = self._materialized[side]
        if cached is not None:
            cached.stale = True

    def materialize(self, side: Side | str, original: dict[str, Any]) -> dict[str, Any]:
        """Apply all pending edits for ``side`` to a deep copy of ``original``.

        Raises:
            InvalidSideError: If side is not 'left' or 'right'.
        """
        side = coerce_side(side)
        document = copy.deepcopy(original)

        for edit in sorted(self._edits[side].values(), key=lambda e: e.timestamp):
            if edit.kind is EditKind.DELETE:
                kp.remove(document, edit.key_path)
            else:
                kp.write(document, edit.key_path, copy.deepcopy(edit.new_value))

        self._materialized[side] = _Materialized(source=original, document=document)
        return document

    def current_document(self, side: Side | str, original: dict[str, Any]) -> dict[str, Any]:
        """Return the edited document for ``side``, or ``original`` if unedited.

        No copy is made when the side has no pending edits.

        Raises:
            InvalidSideError: If side is not 'left' or 'right'.
        """
        side = coerce_side(side)
        if not self._edits[side]:
            return original

        cached = self._materialized[side]
        if cached is None or cached.stale or cached.source is not original:
            return self.materialize(side, original)
        return cached.document

    def clear(self, side: Side | str) -> None:
        """Discard pending edits for one side.

        Raises:
            InvalidSideError: If side is not 'left' or 'right'.
        """
        side = coerce_side(side)
        self._edits[side].clear()
        self._materialized[side] = None
        logger.debug("Cleared edits on %s", side.value)

    def clear_all(self) -> None:
        """Discard pending edits for both sides."""
        for side in Side:
            self.clear(side)

    def has_edits(self, side: Side | str | None = None) -> bool:
        """Check whether ``side`` (or either side if None) has pending edits."""
        if side is None:
            return any(self._edits[s] for s in Side)
        return bool(self._edits[coerce_side(side)])

    def edits_for(self, side: Side | str) -> list[EditRecord]:
        """Return the pending edits for ``side``, oldest first."""
        side = coerce_side(side)
        return sorted(self._edits[side].values(), key=lambda e: e.timestamp)

    def get_edit(self, side: Side | str, key_path: str) -> EditRecord | None:
        """Return the pending edit for (side, key_path), if any."""
        return self._edits[coerce_side(side)].get(key_path)
