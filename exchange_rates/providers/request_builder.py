from __future__ import annotations

import logging
import re
import time
from collections.abc import Mapping
from typing import Any

from requests.exceptions import Timeout

from exchange_rates.errors import (
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from exchange_rates.logging import provider_log_extra

from .base import Transport

logger = logging.getLogger(__name__)

QUERY_KEYS = frozenset({"base", "symbols", "start_at", "end_at"})

_PATH_PATTERN = re.compile(r"/(latest|history|\d{4}-\d{2}-\d{2})")


class RequestBuilder:
    """Turns a logical rate query into one provider request.

    Responses are returned as plain mappings of the shape
    ``{"base": ..., "rates": {...}}``. The transport is injected so callers
    and tests can swap the network out.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def make_request(
        self,
        path: str,
        query_params: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        if not _PATH_PATTERN.fullmatch(path):
            raise ValueError(f"Unsupported provider path {path!r}")

        params = self._build_params(query_params or {})
        provider = getattr(self._transport, "name", type(self._transport).__name__)
        started = time.perf_counter()

        try:
            payload = self._fetch(path, params, timeout)
            self._check_payload(payload)
        except ProviderError as exc:
            logger.warning(
                "Provider request failed",
                extra=provider_log_extra(
                    provider=provider,
                    path=path,
                    base=params.get("base"),
                    event="provider.request.failed",
                    status="error",
                    duration_ms=_elapsed_ms(started),
                    error=str(exc),
                ),
            )
            raise

        logger.debug(
            "Provider request completed",
            extra=provider_log_extra(
                provider=provider,
                path=path,
                base=params.get("base"),
                event="provider.request.completed",
                status="ok",
                duration_ms=_elapsed_ms(started),
            ),
        )
        return dict(payload)

    def _fetch(self, path: str, params: dict[str, str], timeout: float | None) -> Any:
        # Injected transports may raise raw socket or requests errors (both OSError).
        try:
            return self._transport.get(path, params=params, timeout=timeout)
        except ProviderError:
            raise
        except (TimeoutError, Timeout) as exc:
            raise ProviderTimeoutError(
                f"Request to {path} timed out: {exc}", payload={"path": path}
            ) from exc
        except OSError as exc:
            raise ProviderUnavailableError(
                f"Failed to fetch {path}: {exc}", payload={"path": path}
            ) from exc

    @staticmethod
    def _build_params(query_params: Mapping[str, Any]) -> dict[str, str]:
        unknown = set(query_params) - QUERY_KEYS
        if unknown:
            raise ValueError(f"Unsupported query parameters: {sorted(unknown)}")

        params: dict[str, str] = {}
        for key, value in query_params.items():
            if value is None:
                continue
            if isinstance(value, list | tuple):
                value = ",".join(str(item) for item in value)
            params[key] = str(value)
        return params

    @staticmethod
    def _check_payload(payload: Any) -> None:
        if not isinstance(payload, Mapping):
            raise ProviderResponseError("Provider response is not a JSON object", body=payload)

        if "error" in payload:
            raise ProviderResponseError(f"Provider error payload: {payload['error']}", body=payload)

        if not isinstance(payload.get("rates"), Mapping):
            raise ProviderResponseError("Provider response missing 'rates' field", body=payload)


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
