# ws2812tool

Drive a WS2812 LED strip through a serial port (UART). Each 24-bit colour is
encoded into 8 UART bytes (7 data bits, no parity, one stop bit), so a plain
serial adapter can generate the WS2812 timing.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ws2812tool ports
ws2812tool color 255 0 0
ws2812tool manual
ws2812tool animate moving_pixel --frames 20
```

Commands:

- `ports`: list the serial ports present (name and description).
- `color R G B`: set every LED to one colour (each component 0..255).
- `manual`: send the per-LED colours stored in the settings file.
- `animate TYPE`: run `moving_pixel`, `all_random` or `all_random_half_off`.
  `--frames N` stops after N frames; by default it runs until interrupted.

Options, given before the command:

- `--config PATH`: settings file (JSON). By default, a `.json` file named
  after the running program and placed next to it.
- `--port NAME`: serial port name, overriding the settings.
- `--baud RATE`: baud rate, overriding the settings.
- `--leds N`: number of LEDs (1..1024); an invalid value keeps the setting.

The settings file is read if present; defaults are used otherwise. The
command exits with status 1 if the port cannot be opened or a write fails.

## Library use

Encode colours:

```python
from ws2812tool.ws2812 import Ws2812Color, encode

data = encode([Ws2812Color(255, 0, 0), Ws2812Color(0, 0, 255)])
assert len(data) == 16  # 8 bytes per LED
```

Send them to a strip:

```python
from ws2812tool.comport import ComPort
from ws2812tool.ws2812 import Ws2812Color, write_colors

with ComPort() as port:
    port.open("COM10", 2000000)
    write_colors(port, [Ws2812Color(0, 64, 0)] * 8)
```

`write_colors` raises `Ws2812Error` when the port is not open, when there
are more than 5000 LEDs, or when the write fails. After a failed write it
closes the port. `ComPort.open` raises `ComPortError` if the port cannot be
opened.

Other modules:

- `ws2812tool.app`: `Application` ties settings, port, logging and LED views
  together; `normalize_port_name` and `parse_led_count` helpers; `main`.
- `ws2812tool.animations`: a moving pixel, all-random and half-off random
  patterns (`Animator`, `AnimationType`, `MovingPixel`).
- `ws2812tool.manualcontrol`: per-LED colour editing (`ManualControl`) and
  `one_for_all` for a uniform colour.
- `ws2812tool.settings`: load and save `Settings` as JSON
  (`Settings.read`, `Settings.write`); errors raise `SettingsError`.
- `ws2812tool.comport`: list ports with `enumerate_ports()`.
- `ws2812tool.log`: a process-wide logger, obtained with `get_logger()`.
- `ws2812tool.logview`: `LogView`, a line-limited buffer fed by the logger.
- `ws2812tool.mru`: `Mru`, a most-recently-used list of up to 20 items.
- `ws2812tool.colors`, `ws2812tool.keybkeys`: named colour and virtual key
  tables.
- `ws2812tool.debugdump`: `BinaryDump`, writes raw bytes to a file.
- `ws2812tool.mathutils`: `almost_equal` for floats.

## What it does not do

There is no graphical interface: no windows, grids or sliders for editing
colours interactively. The command line reads the settings file but does not
write it back; `Application.shutdown` can save settings when used from code.