"""LED strip animations."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import MutableSequence, Optional

from .ws2812 import Ws2812Color

MOVING_PIXEL_INTERVAL = 500
RANDOM_INTERVAL = 250
RANDOM_MAX = 64


class AnimationType(IntEnum):
    """Available animations."""

    MOVING_PIXEL = 0
    ALL_RANDOM = 1
    ALL_RANDOM_HALF_OFF = 2


def _random_color(rng: random.Random) -> Ws2812Color:
    return Ws2812Color(
        r=rng.randrange(RANDOM_MAX),
        g=rng.randrange(RANDOM_MAX),
        b=rng.randrange(RANDOM_MAX),
    )


class MovingPixel:
    """A single full-brightness pixel running along the strip.

    Its colour changes blue -> red -> green -> blue each time it starts over.
    """

    def __init__(self) -> None:
        self.pos = 0
        self.last_color = "b"

    def step(self, colors: MutableSequence[Ws2812Color]) -> int:
        """Draw the next frame into colors; return the frame interval in ms."""
        count = len(colors)
        if count == 0:
            return MOVING_PIXEL_INTERVAL
        if self.pos >= count:
            self.pos = 0
        if self.pos == 0:
            self.last_color = {"b": "r", "r": "g"}.get(self.last_color, "b")

        colors[:] = [Ws2812Color() for _ in range(count)]
        pixel = colors[self.pos]
        if self.last_color == "b":
            pixel.b = 255
        elif self.last_color == "r":
            pixel.r = 255
        else:
            pixel.g = 255
        self.pos += 1
        return MOVING_PIXEL_INTERVAL


def step_all_random(colors: MutableSequence[Ws2812Color], rng: random.Random) -> int:
    """Give every LED a random dim colour; return the frame interval in ms."""
    colors[:] = [_random_color(rng) for _ in range(len(colors))]
    return RANDOM_INTERVAL


def step_all_random_half_off(
    colors: MutableSequence[Ws2812Color], rng: random.Random
) -> int:
    """Turn each LED off or give it a random dim colour, at even odds."""
    colors[:] = [
        Ws2812Color() if rng.randrange(2) else _random_color(rng)
        for _ in range(len(colors))
    ]
    return RANDOM_INTERVAL


class Animator:
    """Runs one animation, keeping its state between frames."""

    def __init__(self, kind: int = AnimationType.MOVING_PIXEL,
                 rng: Optional[random.Random] = None) -> None:
        self.kind = AnimationType(kind)
        self.rng = rng if rng is not None else random.Random()
        self._moving_pixel = MovingPixel()

    def step(self, colors: MutableSequence[Ws2812Color]) -> int:
        """Draw the next frame into colors; return the frame interval in ms."""
        if self.kind is AnimationType.MOVING_PIXEL:
            return self._moving_pixel.step(colors)
        if self.kind is AnimationType.ALL_RANDOM:
            return step_all_random(colors, self.rng)
        if self.kind is AnimationType.ALL_RANDOM_HALF_OFF:
            return step_all_random_half_off(colors, self.rng)
        raise ValueError("Unhandled animation type!")