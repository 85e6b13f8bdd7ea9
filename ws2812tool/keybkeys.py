"""Table of virtual key codes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VKey:
    """A virtual key: symbolic name, key code and description."""

    name: str
    code: int
    description: str


_PACKET_DESCRIPTION = (
    "Used to pass Unicode characters as if they were keystrokes. The VK_PACKET "
    "key is the low word of a 32-bit Virtual Key value used for non-keyboard "
    "input methods. For more information, see Remark in KEYBDINPUT, SendInput, "
    "WM_KEYDOWN, and WM_KEYUP"
)


def _keys() -> list[VKey]:
    keys = [
        VKey("VK_LBUTTON", 0x01, "Left mouse button"),
        VKey("VK_RBUTTON", 0x02, "Right mouse button"),
        VKey("VK_CANCEL", 0x03, "Control-break processing"),
        VKey("VK_MBUTTON", 0x04, "Middle mouse button"),
        VKey("VK_XBUTTON1", 0x05, "X1 mouse button"),
        VKey("VK_XBUTTON2", 0x06, "X2 mouse button"),
        VKey("VK_BACK", 0x08, "BACKSPACE"),
        VKey("VK_TAB", 0x09, "TAB"),
        VKey("VK_CLEAR", 0x0C, "CLEAR"),
        VKey("VK_RETURN", 0x0D, "ENTER"),
        VKey("VK_PAUSE", 0x13, "PAUSE"),
        VKey("VK_CAPITAL", 0x14, "CAPS LOCK"),
        VKey("VK_KANA", 0x15, "IME Kana mode"),
        VKey("VK_HANGUL", 0x15, "IME Hangul mode"),
        VKey("VK_JUNJA", 0x17, "IME Junja mode"),
        VKey("VK_FINAL", 0x18, "IME final mode"),
        VKey("VK_HANJA", 0x19, "IME Hanja mode"),
        VKey("VK_KANJI", 0x19, "IME Kanji mode"),
        VKey("VK_ESCAPE", 0x1B, "ESC"),
        VKey("VK_CONVERT", 0x1C, "IME convert"),
        VKey("VK_NONCONVERT", 0x1D, "IME nonconvert"),
        VKey("VK_ACCEPT", 0x1E, "IME accept"),
        VKey("VK_MODECHANGE", 0x1F, "IME mode change request"),
        VKey("VK_SPACE", 0x20, "SPACEBAR"),
        VKey("VK_PRIOR", 0x21, "PAGE UP"),
        VKey("VK_NEXT", 0x22, "PAGE DOWN"),
        VKey("VK_END", 0x23, "END"),
        VKey("VK_HOME", 0x24, "HOME"),
        VKey("VK_LEFT", 0x25, "LEFT ARROW"),
        VKey("VK_UP", 0x26, "UP ARROW"),
        VKey("VK_RIGHT", 0x27, "RIGHT ARROW"),
        VKey("VK_DOWN", 0x28, "DOWN ARROW"),
        VKey("VK_SELECT", 0x29, "SELECT"),
        VKey("VK_PRINT", 0x2A, "PRINT"),
        VKey("VK_EXECUTE", 0x2B, "EXECUTE"),
        VKey("VK_SNAPSHOT", 0x2C, "PRINT SCREEN"),
        VKey("VK_INSERT", 0x2D, "INS"),
        VKey("VK_DELETE", 0x2E, "DEL"),
        VKey("VK_HELP", 0x2F, "HELP"),
    ]
    keys.extend(VKey(f"{d} key", 0x30 + d, f"{d} key") for d in range(10))
    keys.extend(
        VKey(f"{chr(c)} key", c, f"{chr(c)} key") for c in range(ord("A"), ord("Z") + 1)
    )
    keys += [
        VKey("VK_LWIN", 0x5B, "Left Windows key (Natural keyboard)"),
        VKey("VK_RWIN", 0x5C, "Right Windows key (Natural keyboard)"),
        VKey("VK_APPS", 0x5D, "Applications key (Natural keyboard)"),
        VKey("VK_SLEEP", 0x5F, "Computer Sleep key"),
    ]
    keys.extend(VKey(f"VK_NUMPAD{d}", 0x60 + d, f"Numeric keypad {d}") for d in range(10))
    keys += [
        VKey("VK_MULTIPLY", 0x6A, "Multiply"),
        VKey("VK_ADD", 0x6B, "Add"),
        VKey("VK_SEPARATOR", 0x6C, "Separator"),
        VKey("VK_SUBTRACT", 0x6D, "Subtract"),
        VKey("VK_DECIMAL", 0x6E, "Decimal"),
        VKey("VK_DIVIDE", 0x6F, "Divide"),
    ]
    keys.extend(VKey(f"VK_F{n}", 0x6F + n, f"F{n} key") for n in range(1, 25))
    keys += [
        VKey("VK_NUMLOCK", 0x90, "NUM LOCK"),
        VKey("VK_SCROLL", 0x91, "SCROLL LOCK"),
        VKey("VK_NUMLOCK", 0x90, "NUM LOCK"),
        VKey("VK_SCROLL", 0x91, "SCROLL LOCK"),
        VKey("VK_LMENU", 0xA4, "Left MENU key"),
        VKey("VK_RMENU", 0xA5, "Right MENU key"),
        VKey("VK_BROWSER_BACK", 0xA6, "Browser Back key"),
        VKey("VK_BROWSER_FORWARD", 0xA7, "Browser Forward key"),
        VKey("VK_BROWSER_REFRESH", 0xA8, "Browser Refresh key"),
        VKey("VK_BROWSER_STOP", 0xA9, "Browser Stop key"),
        VKey("VK_BROWSER_SEARCH", 0xAA, "Browser Search key"),
        VKey("VK_BROWSER_FAVORITES", 0xAB, "Browser Favorites key"),
        VKey("VK_BROWSER_HOME", 0xAC, "Browser Start and Home key"),
        VKey("VK_VOLUME_MUTE", 0xAD, "Volume Mute key"),
        VKey("VK_VOLUME_DOWN", 0xAE, "Volume Down key"),
        VKey("VK_VOLUME_UP", 0xAF, "Volume Up key"),
        VKey("VK_MEDIA_NEXT_TRACK", 0xB0, "Next Track key"),
        VKey("VK_MEDIA_PREV_TRACK", 0xB1, "Previous Track key"),
        VKey("VK_MEDIA_STOP", 0xB2, "Stop Media key"),
        VKey("VK_MEDIA_PLAY_PAUSE", 0xB3, "Play/Pause Media key"),
        VKey("VK_LAUNCH_MAIL", 0xB4, "Start Mail key"),
        VKey("VK_LAUNCH_MEDIA_SELECT", 0xB5, "Select Media key"),
        VKey("VK_LAUNCH_APP1", 0xB6, "Start Application 1 key"),
        VKey("VK_LAUNCH_APP2", 0xB7, "Start Application 2 key"),
        VKey("VK_PROCESSKEY", 0xE5, "IME PROCESS key"),
        VKey("VK_PACKET", 0xE7, _PACKET_DESCRIPTION),
        VKey("VK_PACKET", 0xE7, _PACKET_DESCRIPTION),
        VKey("VK_ATTN", 0xF6, "Attn key"),
        VKey("VK_CRSEL", 0xF7, "CrSel key"),
        VKey("VK_EXSEL", 0xF8, "ExSel key"),
        VKey("VK_EREOF", 0xF9, "Erase EOF key"),
        VKey("VK_PLAY", 0xFA, "Play key"),
        VKey("VK_ZOOM", 0xFB, "Zoom key"),
        VKey("VK_PA1", 0xFD, "PA1 key"),
        VKey("VK_OEM_CLEAR", 0xFE, "Clear key"),
    ]
    return keys


VKEY_LIST: tuple[VKey, ...] = tuple(_keys())


def vkey_find(name: str) -> int:
    """Return the index in VKEY_LIST of the first key with this name.

    Raises KeyError if no key has that name.
    """
    for index, key in enumerate(VKEY_LIST):
        if key.name == name:
            return index
    raise KeyError(name)