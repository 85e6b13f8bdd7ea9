"""Application settings stored as a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Mapping, Optional

from .ws2812 import Ws2812Color

# Room left for the taskbar below the usable screen height.
_TASKBAR_MARGIN = 32


class SettingsError(Exception):
    """Raised when the settings file cannot be read, parsed or written."""


@dataclass
class GuiSettings:
    """User interface options."""

    SCALING_MIN: ClassVar[int] = 50
    SCALING_MAX: ClassVar[int] = 200

    scaling_pct: int = 100


@dataclass
class MainWindowSettings:
    """Position, size and state of the main window."""

    pos_x: int = 30
    pos_y: int = 30
    width: int = 600
    height: int = 400
    window_maximized: bool = False
    always_on_top: bool = False


@dataclass
class LoggingSettings:
    """Logging options."""

    MIN_MAX_FILE_SIZE: ClassVar[int] = 0
    MAX_MAX_FILE_SIZE: ClassVar[int] = 1000 * 1024 * 1024
    DEF_MAX_FILE_SIZE: ClassVar[int] = 10 * 1024 * 1024

    log_to_file: bool = False
    flush: bool = False
    max_file_size: int = DEF_MAX_FILE_SIZE
    max_ui_log_lines: int = 5000


@dataclass
class SerialPortSettings:
    """Serial port options."""

    name: str = "COM10"
    baud: int = 2000000
    parity: str = "N"
    data_bit: int = 7
    stop_bit: int = 1
    open_at_startup: bool = True
    auto_reinit: bool = True


@dataclass
class Ws2812Settings:
    """LED strip options."""

    MAX_LED_COUNT: ClassVar[int] = 1024
    DEFAULT_LED_COUNT: ClassVar[int] = 8

    led_count: int = DEFAULT_LED_COUNT
    manual_control: list[Ws2812Color] = field(default_factory=list)
    manual_control_apply_immediately: bool = True

    def resize_manual_control(self, count: Optional[int] = None) -> None:
        """Truncate or pad the manual colours (with black) to count LEDs."""
        count = self.led_count if count is None else count
        del self.manual_control[count:]
        self.manual_control.extend(
            Ws2812Color() for _ in range(count - len(self.manual_control))
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _get_int(
    section: Mapping[str, Any],
    key: str,
    current: int,
    low: Optional[int] = None,
    high: Optional[int] = None,
) -> int:
    value = section.get(key)
    if not _is_int(value):
        return current
    if low is not None and value < low:
        return current
    if high is not None and value > high:
        return current
    return value


def _get_uint(section: Mapping[str, Any], key: str, current: int) -> int:
    return _get_int(section, key, current, low=0)


def _get_bool(section: Mapping[str, Any], key: str, current: bool) -> bool:
    value = section.get(key)
    return value if isinstance(value, bool) else current


def _get_str(section: Mapping[str, Any], key: str, current: str) -> str:
    value = section.get(key)
    return value if isinstance(value, str) else current


def _component(color: Any, key: str) -> int:
    if not isinstance(color, Mapping):
        return 0
    value = color.get(key)
    if isinstance(value, bool):
        return int(value)
    if _is_int(value) and value >= 0:
        return value & 0xFF
    return 0


@dataclass
class Settings:
    """All application settings."""

    gui: GuiSettings = field(default_factory=GuiSettings)
    main_window: MainWindowSettings = field(default_factory=MainWindowSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    serial_port: SerialPortSettings = field(default_factory=SerialPortSettings)
    ws2812: Ws2812Settings = field(default_factory=Ws2812Settings)

    def read(self, path: str | Path, screen_size: Optional[tuple[int, int]] = None) -> None:
        """Load settings from a JSON file.

        Values that are missing, of the wrong type or out of range keep their
        current value. ``screen_size`` (width, height) bounds the window size.
        Raises SettingsError if the file cannot be read or parsed.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"cannot read {path}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"cannot parse {path}") from exc
        self.update_from_dict(data, screen_size)

    def update_from_dict(
        self, data: Any, screen_size: Optional[tuple[int, int]] = None
    ) -> None:
        """Apply settings from a parsed JSON document."""
        if not isinstance(data, Mapping):
            raise SettingsError("settings document is not a JSON object")

        max_x: Optional[int] = None
        max_y: Optional[int] = None
        if screen_size is not None:
            max_x = screen_size[0] + 20
            max_y = screen_size[1] - _TASKBAR_MARGIN + 20

        win = self.main_window
        sec = _section(data, "frmMain")
        win.width = _get_int(sec, "width", win.width, 250, max_x)
        win.height = _get_int(sec, "height", win.height, 200, max_y)
        win.pos_x = _get_int(sec, "positionX", win.pos_x)
        win.pos_y = _get_int(sec, "positionY", win.pos_y)
        win.window_maximized = _get_bool(sec, "maximized", win.window_maximized)
        win.always_on_top = _get_bool(sec, "alwaysOnTop", win.always_on_top)

        log = self.logging
        sec = _section(data, "logging")
        log.log_to_file = _get_bool(sec, "logToFile", log.log_to_file)
        log.flush = _get_bool(sec, "flush", log.flush)
        log.max_file_size = _get_int(
            sec,
            "maxFileSize",
            log.max_file_size,
            LoggingSettings.MIN_MAX_FILE_SIZE,
            LoggingSettings.MAX_MAX_FILE_SIZE,
        )
        log.max_ui_log_lines = _get_uint(sec, "maxUiLogLines", log.max_ui_log_lines)

        port = self.serial_port
        sec = _section(data, "serialPort")
        port.name = _get_str(sec, "name", port.name)
        port.baud = _get_int(sec, "baud", port.baud)
        port.parity = _get_str(sec, "parity", port.parity)
        port.data_bit = _get_int(sec, "data_bit", port.data_bit)
        port.stop_bit = _get_int(sec, "stop_bit", port.stop_bit)
        port.open_at_startup = _get_bool(sec, "openAtStartup", port.open_at_startup)
        port.auto_reinit = _get_bool(sec, "autoReinit", port.auto_reinit)

        leds = self.ws2812
        sec = _section(data, "ws2812")
        leds.led_count = _get_uint(sec, "ledCount", leds.led_count)
        if leds.led_count > Ws2812Settings.MAX_LED_COUNT:
            leds.led_count = Ws2812Settings.DEFAULT_LED_COUNT
        manual = sec.get("manualControl")
        if isinstance(manual, list):
            leds.manual_control = [
                Ws2812Color(
                    r=_component(item, "r"),
                    g=_component(item, "g"),
                    b=_component(item, "b"),
                )
                for item in manual
            ]
        leds.resize_manual_control()
        leds.manual_control_apply_immediately = _get_bool(
            sec, "manualControlApplyImmediately", leds.manual_control_apply_immediately
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as the JSON document written to the file."""
        win = self.main_window
        log = self.logging
        port = self.serial_port
        leds = self.ws2812
        return {
            "frmMain": {
                "width": win.width,
                "height": win.height,
                "positionX": win.pos_x,
                "positionY": win.pos_y,
                "maximized": win.window_maximized,
                "alwaysOnTop": win.always_on_top,
            },
            "logging": {
                "logToFile": log.log_to_file,
                "flush": log.flush,
                "maxFileSize": log.max_file_size,
                "maxUiLogLines": log.max_ui_log_lines,
            },
            "serialPort": {
                "name": port.name,
                "baud": port.baud,
                "parity": port.parity,
                "data_bit": port.data_bit,
                "stop_bit": port.stop_bit,
                "openAtStartup": port.open_at_startup,
                "autoReinit": port.auto_reinit,
            },
            "ws2812": {
                "ledCount": leds.led_count,
                "manualControl": [
                    {"r": color.r, "g": color.g, "b": color.b}
                    for color in leds.manual_control
                ],
                "manualControlApplyImmediately": leds.manual_control_apply_immediately,
            },
        }

    def write(self, path: str | Path) -> None:
        """Save the settings as JSON. Raises SettingsError on failure."""
        text = json.dumps(self.to_dict(), indent=3, sort_keys=True) + "\n"
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"cannot write {path}") from exc