"""Window-system settings and key code translation for the supported backends."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict

from aphcore.input import Key


@dataclass
class WSICreateInfo:
    width: int
    height: int
    enable_ui: bool = False


# GLFW key codes.
GLFW_KEY_SPACE = 32
GLFW_KEY_0 = 48
GLFW_KEY_A = 65
GLFW_KEY_ESCAPE = 256
GLFW_KEY_ENTER = 257
GLFW_KEY_RIGHT = 262
GLFW_KEY_LEFT = 263
GLFW_KEY_DOWN = 264
GLFW_KEY_UP = 265
GLFW_KEY_LEFT_SHIFT = 340
GLFW_KEY_LEFT_CONTROL = 341
GLFW_KEY_LEFT_ALT = 342

# SDL2 key codes; keys without a character use the scancode with bit 30 set.
_SDLK_SCANCODE_MASK = 1 << 30
SDLK_RETURN = ord("\r")
SDLK_ESCAPE = 0x1B
SDLK_SPACE = ord(" ")
SDLK_0 = ord("0")
SDLK_a = ord("a")
SDLK_RIGHT = 79 | _SDLK_SCANCODE_MASK
SDLK_LEFT = 80 | _SDLK_SCANCODE_MASK
SDLK_DOWN = 81 | _SDLK_SCANCODE_MASK
SDLK_UP = 82 | _SDLK_SCANCODE_MASK
SDLK_LCTRL = 224 | _SDLK_SCANCODE_MASK
SDLK_LSHIFT = 225 | _SDLK_SCANCODE_MASK
SDLK_LALT = 226 | _SDLK_SCANCODE_MASK

_DIGIT_KEYS = [Key(Key.DIGIT_0 + n) for n in range(10)]
_LETTER_KEYS = [Key[letter] for letter in string.ascii_uppercase]

_GLFW_KEYS: Dict[int, Key] = {
    **{GLFW_KEY_A + n: key for n, key in enumerate(_LETTER_KEYS)},
    **{GLFW_KEY_0 + n: key for n, key in enumerate(_DIGIT_KEYS)},
    GLFW_KEY_LEFT_CONTROL: Key.LEFT_CTRL,
    GLFW_KEY_LEFT_ALT: Key.LEFT_ALT,
    GLFW_KEY_LEFT_SHIFT: Key.LEFT_SHIFT,
    GLFW_KEY_ENTER: Key.RETURN,
    GLFW_KEY_SPACE: Key.SPACE,
    GLFW_KEY_ESCAPE: Key.ESCAPE,
    GLFW_KEY_LEFT: Key.LEFT,
    GLFW_KEY_RIGHT: Key.RIGHT,
    GLFW_KEY_UP: Key.UP,
    GLFW_KEY_DOWN: Key.DOWN,
}

_SDL2_KEYS: Dict[int, Key] = {
    **{SDLK_a + n: key for n, key in enumerate(_LETTER_KEYS)},
    **{SDLK_0 + n: key for n, key in enumerate(_DIGIT_KEYS)},
    SDLK_LCTRL: Key.LEFT_CTRL,
    SDLK_LALT: Key.LEFT_ALT,
    SDLK_LSHIFT: Key.LEFT_SHIFT,
    SDLK_RETURN: Key.RETURN,
    SDLK_SPACE: Key.SPACE,
    SDLK_ESCAPE: Key.ESCAPE,
    SDLK_LEFT: Key.LEFT,
    SDLK_RIGHT: Key.RIGHT,
    SDLK_UP: Key.UP,
    SDLK_DOWN: Key.DOWN,
}


def glfw_key_cast(key: int) -> Key:
    """Translate a GLFW key code; unmapped codes give Key.UNKNOWN."""
    return _GLFW_KEYS.get(key, Key.UNKNOWN)


def sdl2_key_cast(key: int) -> Key:
    """Translate an SDL2 key code; unmapped codes give Key.UNKNOWN."""
    return _SDL2_KEYS.get(key, Key.UNKNOWN)