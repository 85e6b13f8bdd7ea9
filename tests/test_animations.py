import random

import pytest

from ws2812tool.animations import (
    RANDOM_MAX,
    AnimationType,
    Animator,
    MovingPixel,
    step_all_random,
    step_all_random_half_off,
)
from ws2812tool.ws2812 import Ws2812Color


def _blank(n):
    return [Ws2812Color() for _ in range(n)]


def test_moving_pixel_sequence():
    anim = MovingPixel()
    colors = _blank(3)
    assert anim.step(colors) == 500
    assert colors == [Ws2812Color(r=255), Ws2812Color(), Ws2812Color()]
    anim.step(colors)
    assert colors == [Ws2812Color(), Ws2812Color(r=255), Ws2812Color()]
    anim.step(colors)
    assert colors[2] == Ws2812Color(r=255)
    anim.step(colors)
    assert colors == [Ws2812Color(g=255), Ws2812Color(), Ws2812Color()]


def test_moving_pixel_cycles_colors():
    anim = MovingPixel()
    colors = _blank(1)
    seen = []
    for _ in range(4):
        anim.step(colors)
        seen.append(colors[0])
    assert seen == [Ws2812Color(r=255), Ws2812Color(g=255), Ws2812Color(b=255), Ws2812Color(r=255)]


def test_moving_pixel_empty_strip():
    anim = MovingPixel()
    colors = []
    assert anim.step(colors) == 500
    assert colors == []
    assert anim.pos == 0


def test_moving_pixel_exactly_one_lit():
    anim = MovingPixel()
    colors = _blank(5)
    for _ in range(12):
        anim.step(colors)
        lit = [c for c in colors if c != Ws2812Color()]
        assert len(lit) == 1


def test_all_random_bounds_and_determinism():
    a = _blank(50)
    b = _blank(50)
    assert step_all_random(a, random.Random(7)) == 250
    step_all_random(b, random.Random(7))
    assert a == b
    assert all(max(c.r, c.g, c.b) < RANDOM_MAX for c in a)


def test_all_random_half_off_bounds():
    colors = _blank(200)
    assert step_all_random_half_off(colors, random.Random(3)) == 250
    assert len(colors) == 200
    assert all(max(c.r, c.g, c.b) < RANDOM_MAX for c in colors)
    assert any(c == Ws2812Color() for c in colors)


def test_animator_dispatch():
    animator = Animator(AnimationType.ALL_RANDOM, random.Random(1))
    colors = _blank(4)
    assert animator.step(colors) == 250
    animator = Animator(AnimationType.MOVING_PIXEL)
    assert animator.step(colors) == 500
    assert colors[0] == Ws2812Color(r=255)


def test_animator_accepts_int_kind():
    assert Animator(2).kind is AnimationType.ALL_RANDOM_HALF_OFF


def test_animator_unknown_type():
    with pytest.raises(ValueError):
        Animator(3)