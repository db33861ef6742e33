"""Debug log: packet statistics, timestamped messages and button press history."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

_log = logging.getLogger(__name__)

_LABEL_REFRESH_MS = 100
_SPEED_WINDOW_MS = 5000


def _stamp(moment: datetime) -> str:
    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}"


class DebugLog:
    """Collects what the configurator reports while a device is connected."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        write_to_file: bool = False,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.write_to_file = write_to_file
        self.packets_count = 0
        self.packets_count_label = 0
        self.packets_speed = "0 ms"
        self.messages: list[str] = []
        self.pressed_log: list[str] = []
        self.unpressed_log: list[str] = []
        self._clock = clock
        self._now = now
        self._label_timer: float | None = None
        self._speed_timer: float | None = None
        self._speed_count = 0

    def _elapsed_ms(self, started: float) -> float:
        return (self._clock() - started) * 1000.0

    def packet_received(self) -> None:
        """Count one packet and refresh the shown count and average interval."""
        self.packets_count += 1
        if self._label_timer is None or self._elapsed_ms(self._label_timer) > _LABEL_REFRESH_MS:
            self.packets_count_label = self.packets_count
            self._label_timer = self._clock()

        if self._speed_timer is not None and self._elapsed_ms(self._speed_timer) > _SPEED_WINDOW_MS:
            elapsed = self._elapsed_ms(self._speed_timer)
            self._speed_timer = self._clock()
            self.packets_speed = f"{elapsed / self._speed_count:.3f} ms"
            self._speed_count = 0
        elif self._speed_timer is None:
            self._speed_timer = self._clock()

        self._speed_count += 1

    def reset_packets_count(self) -> None:
        """Clear packet statistics and the button press history."""
        self.packets_count = 0
        self.packets_count_label = 0
        self._speed_timer = None
        self.packets_speed = "0 ms"
        self.pressed_log.clear()
        self.unpressed_log.clear()

    def _log_file(self, moment: datetime) -> Path | None:
        if self.log_dir is None:
            return None
        return self.log_dir / f"FJLog{moment:%Y-%m-%dT%H%M}.txt"

    def print_msg(self, msg: str) -> str:
        """Record a timestamped message and, if enabled, append it to the log file."""
        moment = self._now()
        line = f"{_stamp(moment)}: {msg}\n"
        self.messages.append(line)
        if self.write_to_file:
            path = self._log_file(moment)
            if path is None:
                _log.warning("cant open file")
                return line
            try:
                with path.open("a", encoding="utf-8") as out:
                    out.write(line)
            except OSError:
                _log.warning("cant open file")
        return line

    def logical_button_state(self, button_number: int, state: bool) -> None:
        """Record that a logical button was pressed or released."""
        action = "pressed" if state else "unpressed"
        line = f"{_stamp(self._now())}: Logical button {button_number} {action}\n"
        (self.pressed_log if state else self.unpressed_log).append(line)

    def set_write_to_file(self, enabled: bool) -> None:
        self.write_to_file = enabled