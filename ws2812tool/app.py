"""Application controller: settings, serial port and LED strip views."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .animations import AnimationType, Animator
from .comport import ComPort, ComPortError, enumerate_ports
from .log import Logger, LogLevel, get_logger
from .logview import LogView
from .manualcontrol import ManualControl, one_for_all
from .settings import Settings, SettingsError, Ws2812Settings
from .ws2812 import Ws2812Color, Ws2812Error, write_colors

PORT_NAME_PREFIX = "\\\\.\\"

STATUS_PORT_NOT_OPENED = "Cannot write: serial port is not opened"
STATUS_WRITE_FAILED = "WS2812 write failed"


class _Port(Protocol):
    @property
    def is_open(self) -> bool: ...

    def open(self, name: str, baudrate: int) -> None: ...

    def close(self) -> None: ...

    def write(self, data: bytes) -> int: ...


def normalize_port_name(name: str) -> str:
    """Return the device name used to open a serial port.

    Windows port names get the device namespace prefix unless they already
    carry it; absolute device paths are returned unchanged.
    """
    if name.startswith(PORT_NAME_PREFIX) or name.startswith("/"):
        return name
    return PORT_NAME_PREFIX + name


def parse_led_count(text: str, current: int) -> int:
    """Return the LED count given as text, or current if it is not valid.

    A valid count is an integer from 1 to the largest supported LED count.
    """
    try:
        count = int(text.strip())
    except ValueError:
        return current
    if 1 <= count <= Ws2812Settings.MAX_LED_COUNT:
        return count
    return current


def _default_config_path() -> Path:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().with_suffix(".json")
    return Path.cwd() / "ws2812tool.json"


class Application:
    """Ties the settings, the serial port, the log and the LED views together.

    ``status`` holds the last status-bar message and ``port_state`` the text
    describing the result of the last attempt to open the serial port.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        port: Optional[_Port] = None,
        *,
        config_path: Optional[str | Path] = None,
        logger: Optional[Logger] = None,
        log_view: Optional[LogView] = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.port: _Port = port if port is not None else ComPort()
        self.config_path = Path(config_path) if config_path else _default_config_path()
        self.log_path = self.config_path.with_suffix(".log")
        self.logger = logger if logger is not None else get_logger()
        self.log_view = log_view if log_view is not None else LogView()
        self.manual = ManualControl(self.settings.ws2812, writer=self.write_colors)
        self.led_count = 0
        self.status = ""
        self.port_state = ""
        self.serial_open_called = False
        self._started = False

    @property
    def open_button_caption(self) -> str:
        return f"{self.settings.serial_port.name} (re)open"

    def set_status(self, text: str) -> None:
        """Show a message in the status bar."""
        self.status = text

    def _apply_log_file(self) -> None:
        if self.settings.logging.log_to_file:
            try:
                self.logger.set_file(self.log_path)
            except OSError:
                self.set_status(f"Cannot open log file {self.log_path}")
        else:
            self.logger.set_file("")

    def load_settings(self) -> None:
        """Read the configuration file, keeping defaults if it cannot be read."""
        try:
            self.settings.read(self.config_path)
        except SettingsError:
            pass
        self._apply_log_file()

    def start(self) -> None:
        """Load settings, hook up logging and open the port if configured to."""
        self.load_settings()
        if not self._started:
            self._started = True
            self.log_view.max_lines = self.settings.logging.max_ui_log_lines
            self.logger.level = LogLevel.TRACE
            self.logger.callback = self.log_view.on_log
            if self.settings.serial_port.open_at_startup:
                try:
                    self.serial_open()
                except ComPortError:
                    pass
            self.update_led_count()
        self.logger.log("Application started\n")

    def shutdown(self, save: bool = True) -> None:
        """Save the settings (unless save is false) and close the port."""
        if save:
            try:
                self.settings.write(self.config_path)
            except SettingsError:
                self.logger.log("Cannot write settings to %s\n", self.config_path)
        self.port.close()

    def serial_open(self) -> None:
        """(Re)open the configured serial port.

        Raises ComPortError if the port cannot be opened; ``port_state``
        describes the outcome either way.
        """
        self.serial_open_called = True
        port_settings = self.settings.serial_port
        try:
            self.port.open(normalize_port_name(port_settings.name), port_settings.baud)
        except ComPortError:
            self.port_state = f"Failed to open {port_settings.name}"
            raise
        self.port_state = f"{port_settings.name} opened, {port_settings.baud} bps"

    def reinit_tick(self) -> bool:
        """Reopen a lost port if automatic reinitialisation is on.

        Does nothing until the port has been opened once. Returns True if the
        port was reopened.
        """
        if not self.serial_open_called:
            return False
        if not self.settings.serial_port.auto_reinit or self.port.is_open:
            return False
        try:
            self.serial_open()
        except ComPortError:
            return False
        return True

    def update_led_count(self) -> None:
        """Pass the configured LED count to the LED views."""
        self.led_count = self.settings.ws2812.led_count
        self.manual.set_led_count(self.led_count)

    def apply_settings(self, new_settings: Settings) -> None:
        """Take over edited settings and apply what changed."""
        previous = self.settings.serial_port
        prev_name, prev_baud = previous.name, previous.baud

        new_settings.ws2812.resize_manual_control()
        self.settings = new_settings
        self.manual.settings = new_settings.ws2812

        self._apply_log_file()
        self.log_view.max_lines = new_settings.logging.max_ui_log_lines

        port_settings = new_settings.serial_port
        if self.serial_open_called and (
            port_settings.name != prev_name or port_settings.baud != prev_baud
        ):
            try:
                self.serial_open()
            except ComPortError:
                pass

        self.update_led_count()

    def write_colors(self, colors: Sequence[Ws2812Color]) -> None:
        """Send colours to the strip, reporting the outcome in ``status``."""
        if not self.port.is_open:
            self.set_status(STATUS_PORT_NOT_OPENED)
            return
        try:
            write_colors(self.port, colors)
        except Ws2812Error:
            self.set_status(STATUS_WRITE_FAILED)
        else:
            self.set_status("")

    def write_manual(self) -> None:
        """Send the manually set colours."""
        self.write_colors(self.manual.colors)

    def write_one_for_all(self, color: Ws2812Color) -> None:
        """Set every LED to the same colour."""
        self.write_colors(one_for_all(color, self.led_count))

    def animation_step(self, animator: Animator) -> Optional[int]:
        """Draw and send the next animation frame.

        Returns the interval in ms until the next frame, or None if the port
        is not open.
        """
        if not self.port.is_open:
            self.set_status(STATUS_PORT_NOT_OPENED)
            return None
        colors = [Ws2812Color() for _ in range(self.led_count)]
        interval = animator.step(colors)
        self.write_colors(colors)
        return interval


def _component(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"{value} outside 0..255")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ws2812tool", description="Drive a WS2812 LED strip over a serial port."
    )
    parser.add_argument("--config", help="settings file (JSON)")
    parser.add_argument("--port", help="serial port name")
    parser.add_argument("--baud", type=int, help="baud rate")
    parser.add_argument("--leds", help="number of LEDs")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("ports", help="list serial ports")

    color = commands.add_parser("color", help="set all LEDs to one colour")
    color.add_argument("r", type=_component)
    color.add_argument("g", type=_component)
    color.add_argument("b", type=_component)

    commands.add_parser("manual", help="send the stored per-LED colours")

    animate = commands.add_parser("animate", help="run an animation")
    animate.add_argument(
        "type",
        choices=[kind.name.lower() for kind in AnimationType],
        help="animation to run",
    )
    animate.add_argument(
        "--frames", type=int, default=0, help="number of frames (0: until interrupted)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry point; returns the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "ports":
        for info in enumerate_ports():
            print(f"{info.name}\t{info.description}")
        return 0

    app = Application(config_path=args.config)
    app.load_settings()
    if args.port:
        app.settings.serial_port.name = args.port
    if args.baud:
        app.settings.serial_port.baud = args.baud
    if args.leds:
        app.settings.ws2812.led_count = parse_led_count(
            args.leds, app.settings.ws2812.led_count
        )
    app.update_led_count()

    try:
        app.serial_open()
    except ComPortError:
        print(app.port_state, file=sys.stderr)
        return 1
    print(app.port_state)

    try:
        if args.command == "color":
            app.write_one_for_all(Ws2812Color(args.r, args.g, args.b))
        elif args.command == "manual":
            app.write_manual()
        else:
            animator = Animator(AnimationType[args.type.upper()])
            frame = 0
            while args.frames <= 0 or frame < args.frames:
                interval = app.animation_step(animator)
                if interval is None or app.status:
                    break
                frame += 1
                time.sleep(interval / 1000)
    except KeyboardInterrupt:
        pass
    finally:
        app.shutdown(save=False)

    if app.status:
        print(app.status, file=sys.stderr)
        return 1
    return 0