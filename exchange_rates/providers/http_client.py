"""Default ``requests``-backed transport for the rate provider."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests
from requests import Response, Session
from requests.exceptions import JSONDecodeError, RequestException, Timeout

from exchange_rates.errors import (
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)

from .base import Transport

DEFAULT_BASE_URL = "https://api.exchangeratesapi.io"


@dataclass(frozen=True)
class HTTPClientConfig:
    """Configuration for the HTTP transport."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 5.0
    api_key: str | None = None


class HTTPClient(Transport):
    """Issues one GET per call; retries are left to the caller."""

    name = "http"

    def __init__(
        self,
        config: HTTPClientConfig | None = None,
        session: Session | None = None,
    ) -> None:
        self._config = config or HTTPClientConfig()
        self._session = session or requests.Session()

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        url = self._build_url(path)
        query = dict(params or {})
        if self._config.api_key:
            query["access_key"] = self._config.api_key
        effective_timeout = timeout if timeout is not None else self._config.timeout

        try:
            response = self._session.get(url, params=query, timeout=effective_timeout)
        except Timeout as exc:
            raise ProviderTimeoutError(
                f"Request to {url} timed out after {effective_timeout}s",
                payload={"url": url},
            ) from exc
        except RequestException as exc:
            raise ProviderUnavailableError(f"Failed to fetch {url}: {exc}", payload={"url": url}) from exc

        return self._handle_response(response)

    def close(self) -> None:
        self._session.close()

    def _build_url(self, path: str) -> str:
        base = self._config.base_url.rstrip("/")
        suffix = path.lstrip("/")
        return f"{base}/{suffix}"

    @staticmethod
    def _handle_response(response: Response) -> Any:
        status = response.status_code
        if status < 200 or status >= 300:
            raise ProviderResponseError(
                f"Provider returned HTTP {status}",
                status_code=status,
                body=response.text,
            )

        try:
            return response.json()
        except JSONDecodeError as exc:
            raise ProviderResponseError(
                "Invalid JSON response",
                status_code=status,
                body=response.text,
            ) from exc
