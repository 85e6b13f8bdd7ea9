"""Serial-port control of WS2812 LED strips: encoding, animations, settings and a command line."""

__version__ = "0.1.0"