"""Per-LED manual colour control and single-colour fills."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from .settings import Ws2812Settings
from .ws2812 import Ws2812Color

# Grid columns holding the colour components.
COLUMN_RED = 1
COLUMN_GREEN = 2
COLUMN_BLUE = 3

_COMPONENTS = {COLUMN_RED: "r", COLUMN_GREEN: "g"}

Writer = Callable[[list[Ws2812Color]], None]


def _component_name(column: int) -> str:
    return _COMPONENTS.get(column, "b")


def _parse_component(text: str) -> Optional[int]:
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if 0 <= value <= 255 else None


class ManualControl:
    """Edits the colours of individual LEDs kept in the LED settings.

    ``writer`` is called with the colour list whenever a change is to be sent
    to the strip at once (see ``manual_control_apply_immediately``).
    """

    def __init__(self, settings: Ws2812Settings, writer: Optional[Writer] = None) -> None:
        self.settings = settings
        self.writer = writer
        self.led_count = 0

    @property
    def colors(self) -> list[Ws2812Color]:
        return self.settings.manual_control

    def set_led_count(self, count: int) -> None:
        """Resize the colour list to count LEDs, padding with black."""
        if self.led_count == count:
            return
        self.led_count = count
        if len(self.settings.manual_control) != count:
            self.settings.resize_manual_control(count)

    def _apply(self) -> None:
        if self.settings.manual_control_apply_immediately and self.writer is not None:
            self.writer(self.settings.manual_control)

    def edit(self, led: int, column: int, text: str) -> int:
        """Set one colour component of an LED from text.

        Column 1 is red, 2 is green and any other column blue. Text that is not
        an integer in 0..255 is ignored. Returns the component's value after
        the edit.
        """
        color = self.settings.manual_control[led]
        name = _component_name(column)
        value = _parse_component(text)
        if value is not None:
            setattr(color, name, value)
            self._apply()
        return getattr(color, name)

    def clear_all(self) -> None:
        """Turn every LED off."""
        for index in range(len(self.settings.manual_control)):
            self.settings.manual_control[index] = Ws2812Color()
        self._apply()

    def clear_led(self, led: int) -> None:
        """Turn one LED off."""
        color = self.settings.manual_control[led]
        color.r = color.g = color.b = 0
        self._apply()

    def preview_tcolor(self, led: int) -> int:
        """Return the LED's colour as a packed 0x00BBGGRR display colour."""
        color = self.settings.manual_control[led]
        return color.r + (color.g << 8) + (color.b << 16)


def one_for_all(color: Ws2812Color, count: int) -> list[Ws2812Color]:
    """Return count separate copies of color, one for each LED."""
    return [replace(color) for _ in range(count)]