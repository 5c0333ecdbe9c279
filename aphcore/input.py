"""Keyboard and mouse identifiers."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    UNKNOWN = 0
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    RETURN = 91
    LEFT_CTRL = 92
    LEFT_ALT = 93
    LEFT_SHIFT = 94
    SPACE = 95
    ESCAPE = 96
    LEFT = 97
    RIGHT = 98
    UP = 99
    DOWN = 100
    COUNT = 101


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    COUNT = 3


class KeyState(IntEnum):
    PRESSED = 0
    RELEASED = 1
    REPEAT = 2
    COUNT = 3


_KEY_NAMES = {
    Key.UNKNOWN: "Unknown",
    Key.RETURN: "Return",
    Key.LEFT_CTRL: "Left Ctrl",
    Key.LEFT_ALT: "Left Alt",
    Key.LEFT_SHIFT: "Left Shift",
    Key.SPACE: "Space",
    Key.ESCAPE: "Escape",
    Key.LEFT: "Left Arrow",
    Key.RIGHT: "Right Arrow",
    Key.UP: "Up Arrow",
    Key.DOWN: "Down Arrow",
    Key.COUNT: "Count",
}


def key_to_str(key: Key | int) -> str:
    """Return a readable name for ``key``; letters and digits give their character."""
    try:
        key = Key(key)
    except ValueError:
        return "Invalid Key"
    if Key.A <= key <= Key.Z or Key.DIGIT_0 <= key <= Key.DIGIT_9:
        return chr(key)
    return _KEY_NAMES.get(key, "Invalid Key")