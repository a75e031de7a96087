# core/channels.py  (cross-thread plumbing: keys in, snapshots out)
from __future__ import annotations
import logging
import queue
from typing import List, TypeVar
from .interfaces import GameSnapshot, SinkClosed, SnapshotSink

logger = logging.getLogger(__name__)

T = TypeVar("T")


def drain(q: "queue.Queue[T]") -> List[T]:
    """Take everything currently queued, oldest first. Never blocks."""
    out: List[T] = []
    while True:
        try:
            out.append(q.get_nowait())
        except queue.Empty:
            return out


def offer_key(q: "queue.Queue[str]", symbol: str) -> bool:
    try:
        q.put_nowait(symbol)
        return True
    except queue.Full:
        logger.debug("key queue full (%d), dropping %r", q.maxsize, symbol)
        return False


class QueueSink(SnapshotSink):
    """Fire-and-forget snapshot channel backed by an unbounded queue."""
    def __init__(self, q: "queue.Queue[GameSnapshot] | None" = None):
        self.queue: "queue.Queue[GameSnapshot]" = q if q is not None else queue.Queue()
        self._closed = False

    def push(self, snap: GameSnapshot) -> None:
        if self._closed:
            raise SinkClosed("snapshot consumer is gone")
        self.queue.put_nowait(snap)

    def close(self) -> None:
        self._closed = True
