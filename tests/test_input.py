import pytest

from aphcore.input import Key, KeyState, MouseButton, key_to_str


LETTERS = [k for k in Key if Key.A <= k <= Key.Z]
DIGITS = [k for k in Key if Key.DIGIT_0 <= k <= Key.DIGIT_9]


def test_letter_and_digit_ranges():
    assert [key_to_str(k) for k in LETTERS] == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert [key_to_str(k) for k in DIGITS] == list("0123456789")
    assert key_to_str(Key(65)) == "A"
    assert key_to_str(Key(48)) == "0"


@pytest.mark.parametrize("key", LETTERS)
def test_letters_map_to_their_character(key):
    assert key_to_str(key) == key.name


@pytest.mark.parametrize("key", DIGITS)
def test_digits_map_to_their_character(key):
    assert key_to_str(key) == key.name[-1]


@pytest.mark.parametrize(
    "key, text",
    [
        (Key.UNKNOWN, "Unknown"),
        (Key.RETURN, "Return"),
        (Key.LEFT_CTRL, "Left Ctrl"),
        (Key.LEFT_ALT, "Left Alt"),
        (Key.LEFT_SHIFT, "Left Shift"),
        (Key.SPACE, "Space"),
        (Key.ESCAPE, "Escape"),
        (Key.LEFT, "Left Arrow"),
        (Key.RIGHT, "Right Arrow"),
        (Key.UP, "Up Arrow"),
        (Key.DOWN, "Down Arrow"),
        (Key.COUNT, "Count"),
    ],
)
def test_named_keys(key, text):
    assert key_to_str(key) == text


def test_unknown_integer_is_invalid():
    assert key_to_str(1000) == "Invalid Key"


def test_special_keys_follow_z():
    assert key_to_str(Key(Key.Z + 1)) == "Return"
    assert key_to_str(Key(Key.DOWN + 1)) == "Count"


def test_mouse_and_key_state_order():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.MIDDLE
    assert MouseButton(2) is MouseButton.RIGHT
    assert [KeyState(i).name for i in range(len(KeyState))] == ["PRESSED", "RELEASED", "REPEAT", "COUNT"]