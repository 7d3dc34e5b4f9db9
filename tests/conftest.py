"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from exchange_rates.providers import RequestBuilder  # noqa: E402
from exchange_rates.services import ExchangeRate  # noqa: E402
from tests.transports import SequencedTransport  # noqa: E402


@pytest.fixture()
def transport() -> SequencedTransport:
    """Transport with an empty response queue; tests queue payloads on it."""

    return SequencedTransport()


@pytest.fixture()
def exchange_rate(transport: SequencedTransport) -> ExchangeRate:
    """Facade wired to the stub transport."""

    return ExchangeRate(RequestBuilder(transport))
