"""BaselineStore - persisted personal-best WPM."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from wordfall.rules import DEFAULT_BASELINE_WPM

logger = logging.getLogger(__name__)


class BaselineStore:
    """A single float in a small JSON file: ``{"baseline_wpm": 52.0}``."""

    def __init__(self, path: str | Path, default: float = DEFAULT_BASELINE_WPM) -> None:
        self._path = Path(path)
        self._default = default

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> float:
        """Stored baseline, or the default when absent or unreadable."""
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            value = float(data["baseline_wpm"])
        except FileNotFoundError:
            return self._default
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("ignoring unreadable baseline file %s: %s", self._path, exc)
            return self._default
        if value <= 0:
            return self._default
        return value

    def save(self, value: float) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps({"baseline_wpm": value}), encoding="utf-8")

    def record(self, final_wpm: float) -> bool:
        """Persist ``final_wpm`` if it beats the stored baseline."""
        current = self.load()
        if final_wpm <= current:
            return False
        self.save(final_wpm)
        logger.info("new baseline WPM %.1f (was %.1f)", final_wpm, current)
        return True


class MemoryBaselineStore:
    """Non-persistent store for tests and throwaway sessions."""

    def __init__(self, value: float = DEFAULT_BASELINE_WPM) -> None:
        self.value = value

    def load(self) -> float:
        return self.value

    def save(self, value: float) -> None:
        self.value = value

    def record(self, final_wpm: float) -> bool:
        if final_wpm <= self.value:
            return False
        self.value = final_wpm
        return True
