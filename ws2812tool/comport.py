"""Serial port access and enumeration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

import serial
from serial.tools import list_ports

from .log import get_logger

IN_QUEUE_SIZE = 8192
OUT_QUEUE_SIZE = 8192
READ_BUFFER_SIZE = 8 * 1024

# Timeouts in milliseconds.
READ_INTERVAL_TIMEOUT = 1
READ_TOTAL_TIMEOUT_MULTIPLIER = 1
READ_TOTAL_TIMEOUT_CONSTANT = 2
WRITE_TOTAL_TIMEOUT_MULTIPLIER = 500
WRITE_TOTAL_TIMEOUT_CONSTANT = 1000


@dataclass
class PortInfo:
    """A serial port present in the system."""

    name: str
    description: str = ""
    technology: str = ""


class ComPortError(Exception):
    """Raised when the serial port cannot be opened, read or written."""


def _technology(hwid: str) -> str:
    if not hwid or hwid == "n/a":
        return ""
    return re.split(r"[\s\\]", hwid, maxsplit=1)[0]


def enumerate_ports() -> list[PortInfo]:
    """Return the serial ports currently present."""
    return [
        PortInfo(
            name=info.device,
            description=getattr(info, "description", "") or "",
            technology=_technology(getattr(info, "hwid", "") or ""),
        )
        for info in list_ports.comports()
    ]


class ComPort:
    """A serial port opened with 7 data bits, no parity, one stop bit.

    DTR is held low and RTS high; no flow control is used.
    """

    def __init__(self, serial_factory: Callable[[], serial.Serial] = serial.Serial) -> None:
        self._factory = serial_factory
        self._serial: Optional[serial.Serial] = None
        self.name = ""

    @property
    def is_open(self) -> bool:
        return self._serial is not None and bool(self._serial.is_open)

    def open(self, name: str, baudrate: int) -> None:
        """(Re)open the port. Raises ComPortError if it cannot be opened."""
        self.close()
        ser = self._factory()
        ser.port = name
        ser.baudrate = baudrate
        ser.bytesize = serial.SEVENBITS
        ser.parity = serial.PARITY_NONE
        ser.stopbits = serial.STOPBITS_ONE
        ser.xonxoff = False
        ser.rtscts = False
        ser.dsrdtr = False
        ser.inter_byte_timeout = READ_INTERVAL_TIMEOUT / 1000
        ser.timeout = READ_TOTAL_TIMEOUT_CONSTANT / 1000
        ser.write_timeout = WRITE_TOTAL_TIMEOUT_CONSTANT / 1000
        ser.dtr = False
        ser.rts = True
        try:
            ser.open()
        except (serial.SerialException, OSError, ValueError) as exc:
            get_logger().log("COM port open failed\n")
            raise ComPortError(f"cannot open {name}") from exc
        set_buffers = getattr(ser, "set_buffer_size", None)
        if set_buffers is not None:
            set_buffers(rx_size=IN_QUEUE_SIZE, tx_size=OUT_QUEUE_SIZE)
        ser.reset_input_buffer()
        ser.reset_output_buffer()
        self._serial = ser
        self.name = name

    def close(self) -> None:
        """Close the port if it is open."""
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def _require_open(self) -> serial.Serial:
        if not self.is_open:
            raise ComPortError("serial port is not opened")
        assert self._serial is not None
        return self._serial

    def write(self, data: bytes) -> int:
        """Write all of data. Raises ComPortError on a failed or short write."""
        ser = self._require_open()
        ser.write_timeout = (
            WRITE_TOTAL_TIMEOUT_MULTIPLIER * len(data) + WRITE_TOTAL_TIMEOUT_CONSTANT
        ) / 1000
        try:
            written = ser.write(data)
        except (serial.SerialException, OSError) as exc:
            raise ComPortError("write failed") from exc
        if written != len(data):
            raise ComPortError(f"wrote {written} of {len(data)} bytes")
        return written

    def read(self, count: int) -> bytes:
        """Read up to count bytes, waiting no longer than the read timeout."""
        if count > READ_BUFFER_SIZE:
            get_logger().log("ReadOverlapped: internal buffer too small!\n")
            raise ValueError(f"cannot read more than {READ_BUFFER_SIZE} bytes at once")
        ser = self._require_open()
        ser.timeout = (
            READ_TOTAL_TIMEOUT_MULTIPLIER * count + READ_TOTAL_TIMEOUT_CONSTANT
        ) / 1000
        try:
            return bytes(ser.read(count))
        except (serial.SerialException, OSError) as exc:
            raise ComPortError("read failed") from exc

    def __enter__(self) -> ComPort:
        return self

    def __exit__(self, *args) -> None:
        self.close()