"""Named colours and their packed colour values."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import NamedTuple


class ColorId(IntEnum):
    """Identifiers of the named colours."""

    CUSTOM = 0

    AQUA = auto()
    BLACK = auto()
    BLUE = auto()
    CREAM = auto()
    DK_GRAY = auto()
    FUCHSIA = auto()
    GRAY = auto()
    GREEN = auto()
    LIME = auto()
    LT_GRAY = auto()
    MAROON = auto()
    MED_GRAY = auto()
    MONEY_GREEN = auto()
    NAVY = auto()
    OLIVE = auto()
    PURPLE = auto()
    RED = auto()
    SILVER = auto()
    SKY_BLUE = auto()
    TEAL = auto()
    WHITE = auto()
    YELLOW = auto()

    ACTIVE_BORDER = auto()
    ACTIVE_CAPTION = auto()
    APP_WORKSPACE = auto()
    BACKGROUND = auto()
    BTN_FACE = auto()
    BTN_HIGHLIGHT = auto()
    BTN_SHADOW = auto()
    BTN_TEXT = auto()
    CAPTION_TEXT = auto()
    GRAY_TEXT = auto()
    HIGHLIGHT = auto()
    HIGHLIGHT_TEXT = auto()
    INACTIVE_BORDER = auto()
    INACTIVE_CAPTION = auto()
    INACTIVE_CAPTION_TEXT = auto()
    MENU = auto()
    MENU_BAR = auto()
    MENU_HIGHLIGHT = auto()
    MENU_TEXT = auto()
    WINDOW = auto()
    WINDOW_FRAME = auto()
    WINDOW_TEXT = auto()


# System colours are flagged by the top byte (0xFF000000 as a signed 32-bit int).
_SYSTEM = -0x01000000


def _system(index: int) -> int:
    return _SYSTEM + index


class _Entry(NamedTuple):
    color_id: ColorId
    name: str
    tcolor: int


_ENTRIES: tuple[_Entry, ...] = (
    _Entry(ColorId.CUSTOM, "<custom color>", 0),

    _Entry(ColorId.AQUA, "Aqua", 0xFFFF00),
    _Entry(ColorId.BLACK, "Black", 0x000000),
    _Entry(ColorId.BLUE, "Blue", 0xFF0000),
    _Entry(ColorId.CREAM, "Cream", 0xF0FBFF),
    _Entry(ColorId.DK_GRAY, "Dark Grey", 0x808080),
    _Entry(ColorId.FUCHSIA, "Fuchsia", 0xFF00FF),
    _Entry(ColorId.GRAY, "Gray", 0x808080),
    _Entry(ColorId.GREEN, "Green", 0x008000),
    _Entry(ColorId.LIME, "Lime Green", 0x00FF00),
    _Entry(ColorId.LT_GRAY, "Light Gray", 0xC0C0C0),
    _Entry(ColorId.MAROON, "Maroon", 0x000080),
    _Entry(ColorId.MED_GRAY, "Medium Gray", 0xA4A0A0),
    _Entry(ColorId.MONEY_GREEN, "Mint Green", 0xC0DCC0),
    _Entry(ColorId.NAVY, "Navy Blue", 0x800000),
    _Entry(ColorId.OLIVE, "Olive Green", 0x008080),
    _Entry(ColorId.PURPLE, "Purple", 0x800080),
    _Entry(ColorId.RED, "Red", 0x0000FF),
    _Entry(ColorId.SILVER, "Silver", 0xC0C0C0),
    _Entry(ColorId.SKY_BLUE, "Sky Blue", 0xF0CAA6),
    _Entry(ColorId.TEAL, "Teal", 0x808000),
    _Entry(ColorId.WHITE, "White", 0xFFFFFF),
    _Entry(ColorId.YELLOW, "Yellow", 0x00FFFF),

    _Entry(ColorId.ACTIVE_BORDER, "clActiveBorder", _system(10)),
    _Entry(ColorId.ACTIVE_CAPTION, "clActiveCaption", _system(2)),
    _Entry(ColorId.APP_WORKSPACE, "clAppWorkSpace", _system(12)),
    _Entry(ColorId.BACKGROUND, "clBackground", _system(1)),
    _Entry(ColorId.BTN_FACE, "clBtnFace", _system(15)),
    _Entry(ColorId.BTN_HIGHLIGHT, "clBtnHighlight", _system(20)),
    _Entry(ColorId.BTN_SHADOW, "clBtnShadow", _system(16)),
    _Entry(ColorId.BTN_TEXT, "clBtnText", _system(18)),
    _Entry(ColorId.CAPTION_TEXT, "clCaptionText", _system(9)),
    _Entry(ColorId.GRAY_TEXT, "clGrayText", _system(17)),
    _Entry(ColorId.HIGHLIGHT, "clHighlight", _system(13)),
    _Entry(ColorId.HIGHLIGHT_TEXT, "clHighlightText", _system(14)),
    _Entry(ColorId.INACTIVE_BORDER, "clInactiveBorder", _system(11)),
    _Entry(ColorId.INACTIVE_CAPTION, "clInactiveCaption", _system(3)),
    _Entry(ColorId.INACTIVE_CAPTION_TEXT, "clInactiveCaptionText", _system(19)),
    _Entry(ColorId.MENU, "clMenu", _system(4)),
    _Entry(ColorId.MENU_BAR, "clMenuBar", _system(30)),
    _Entry(ColorId.MENU_HIGHLIGHT, "clMenuHighlight", _system(29)),
    _Entry(ColorId.MENU_TEXT, "clMenuText", _system(7)),
    _Entry(ColorId.WINDOW, "clWindow", _system(5)),
    _Entry(ColorId.WINDOW_FRAME, "clWindowFrame", _system(6)),
    _Entry(ColorId.WINDOW_TEXT, "clWindowText", _system(8)),
)

_BY_ID = {entry.color_id: entry for entry in _ENTRIES}


def _to_signed32(value: int) -> int:
    return ((value + 0x80000000) % 0x100000000) - 0x80000000


def id_to_text(color_id: int) -> str:
    """Return the display name of a colour, or "???" for an unknown id."""
    entry = _BY_ID.get(color_id)
    return entry.name if entry else "???"


def id_to_tcolor(color_id: int) -> int:
    """Return the packed colour value of a colour id, or 0 for an unknown id."""
    entry = _BY_ID.get(color_id)
    return entry.tcolor if entry else 0


def tcolor_to_id(color: int) -> ColorId:
    """Return the first colour id with the given packed value, else CUSTOM."""
    color = _to_signed32(color)
    return next(
        (entry.color_id for entry in _ENTRIES if entry.tcolor == color),
        ColorId.CUSTOM,
    )