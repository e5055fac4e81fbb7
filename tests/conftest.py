from __future__ import annotations

from typing import Iterable, List, Optional

import pytest


class RecordingSource:
    """Random source that replays fixed values and records each bound."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self._values = list(values or [])
        self.calls: List[int] = []

    def randbelow(self, upper: int) -> int:
        self.calls.append(upper)
        if self._values:
            return self._values.pop(0) % upper
        return 0


@pytest.fixture()
def recording_source() -> RecordingSource:
    return RecordingSource()
