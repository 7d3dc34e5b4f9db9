"""Stub transports standing in for the provider in facade tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from exchange_rates.providers import Transport

QueueItem = Mapping[str, Any] | Exception


@dataclass(slots=True)
class TransportCall:
    """Record of a transport interaction captured for assertions."""

    path: str
    params: dict[str, Any] = field(default_factory=dict)
    timeout: float | None = None


class SequencedTransport(Transport):
    """Transport that yields predefined payloads (or raises errors) in order."""

    name = "stub"

    def __init__(self, responses: Iterable[QueueItem] | None = None) -> None:
        self._responses: deque[QueueItem] = deque(responses or [])
        self.calls: list[TransportCall] = []

    def queue(self, *items: QueueItem) -> None:
        self._responses.extend(items)

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        self.calls.append(TransportCall(path=path, params=dict(params or {}), timeout=timeout))
        if not self._responses:
            raise AssertionError(f"Unexpected request to {path}")
        item = self._responses.popleft()
        if isinstance(item, Exception):
            raise item
        return item
