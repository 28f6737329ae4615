"""Transient on-screen notices driven by session signals."""
from __future__ import annotations

from dataclasses import dataclass

from wordfall import LevelAdvanced, WaveAdvanced
from wordfall_session import SignalBus

from ui.constants import LEVEL_NOTICE_TIME, NOTICE_LEVEL, NOTICE_WAVE, WAVE_NOTICE_TIME


@dataclass
class Notice:
    text: str
    color: tuple[int, int, int]
    expires: float


class NoticeBoard:
    """Collects level/wave banners from the bus; each expires on its own."""

    def __init__(self, bus: SignalBus, clock) -> None:
        self._clock = clock
        self._notices: list[Notice] = []
        bus.subscribe(WaveAdvanced.signal, self._on_wave)
        bus.subscribe(LevelAdvanced.signal, self._on_level)

    def _on_wave(self, event: WaveAdvanced) -> None:
        self._post(f"WAVE {event.wave}", NOTICE_WAVE, WAVE_NOTICE_TIME)

    def _on_level(self, event: LevelAdvanced) -> None:
        self._post(f"LEVEL {event.level}", NOTICE_LEVEL, LEVEL_NOTICE_TIME)

    def _post(self, text: str, color: tuple[int, int, int], duration: float) -> None:
        self._notices.append(Notice(text, color, self._clock() + duration))

    def active(self, now: float) -> list[Notice]:
        self._notices = [n for n in self._notices if n.expires > now]
        return list(self._notices)

    def clear(self) -> None:
        self._notices.clear()
