"""WS2812 LED colour encoding and transmission over a serial port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from .comport import ComPortError
from .log import get_logger

PROMPT = "WS2812: "

MAX_LEDS = 5000
"""Largest number of LEDs that can be written in one go."""

BYTES_PER_LED = 8
"""A 24-bit colour becomes 72 line bits, sent as 8 bytes of 9 bits each."""

# Line code for each group of three colour bits (bitwise complement of the
# pattern, since the serial line is inverted).
WS_CODE: tuple[int, ...] = tuple(
    ~code & 0xFF for code in (0x24, 0x64, 0x2C, 0x6C, 0x25, 0x65, 0x2D, 0x6D)
)


@dataclass
class Ws2812Color:
    """Colour of one LED, each component in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour component {name}={value} outside 0..255")


class Ws2812Error(Exception):
    """Raised when colours cannot be written to the LED strip."""


class _Port(Protocol):
    @property
    def is_open(self) -> bool: ...

    def write(self, data: bytes) -> None: ...

    def close(self) -> None: ...


def encode_color(color: Ws2812Color) -> bytes:
    """Encode one colour (sent in G, R, B order) as 8 line bytes."""
    value = (color.g << 16) | (color.r << 8) | color.b
    return bytes(WS_CODE[(value >> shift) & 0x7] for shift in range(21, -1, -3))


def encode(colors: Iterable[Ws2812Color]) -> bytes:
    """Encode a sequence of colours as the bytes sent on the serial line."""
    return b"".join(encode_color(color) for color in colors)


def write_colors(port: _Port, colors: Sequence[Ws2812Color]) -> bytes:
    """Encode the colours and send them through an open port.

    Returns the bytes sent. Raises Ws2812Error if the port is not open, there
    are too many LEDs, or the write fails; on a failed write the port is closed.
    """
    log = get_logger().log
    if not port.is_open:
        log(PROMPT + "Cannot write: serial port is not opened\n")
        raise Ws2812Error("serial port is not opened")
    if len(colors) > MAX_LEDS:
        log(PROMPT + "Cannot write: number of LEDs exceeds limit\n")
        raise Ws2812Error(f"number of LEDs exceeds limit of {MAX_LEDS}")
    if not colors:
        log(PROMPT + "Nothing to write, number of LEDs = 0\n")
        return b""

    output = encode(colors)
    log(PROMPT + "%s\n", "Bytes TX: " + "".join(f"{byte:02X} " for byte in output))

    try:
        port.write(output)
    except (ComPortError, OSError) as exc:
        log(PROMPT + "UART write failed, closing port\n")
        port.close()
        raise Ws2812Error("UART write failed") from exc
    return output