"""Recorded provider payloads for tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_FIXTURE_ROOT = Path(__file__).parent


def load_json(name: str) -> dict[str, Any]:
    """Load a recorded provider response by filename.

    Every fixture is a provider body, so it must carry ``base`` and ``rates``.
    """

    data = json.loads((_FIXTURE_ROOT / name).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not {"base", "rates"} <= data.keys():
        raise ValueError(f"Fixture '{name}' is not a provider response.")
    return data
