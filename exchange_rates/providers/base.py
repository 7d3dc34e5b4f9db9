"""Abstract interface for the HTTP transport used to reach the rate provider."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Transport(ABC):
    """Executes a GET against the provider and returns the decoded JSON body.

    Implementations raise ``ProviderUnavailableError`` for transport failures
    (``ProviderTimeoutError`` when the timeout expires) and
    ``ProviderResponseError`` for non-2xx statuses or undecodable bodies.
    """

    name: str = "transport"

    @abstractmethod
    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Issue exactly one GET request for ``path`` with ``params``."""
