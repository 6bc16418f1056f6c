"""Deterministic keyboard input control for scripted replays."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import MutableSequence

KEY_COUNT = 256

KS_IDLE = 0
KS_PRESSED = 1
KS_RELEASED = 2


class Key(IntEnum):
    """Keyboard scan codes understood by the game."""

    ESCAPE = 0x01
    NUM_1 = 0x02
    NUM_2 = 0x03
    NUM_3 = 0x04
    NUM_4 = 0x05
    NUM_5 = 0x06
    NUM_6 = 0x07
    NUM_7 = 0x08
    NUM_8 = 0x09
    NUM_9 = 0x0A
    NUM_0 = 0x0B
    MINUS = 0x0C
    EQUALS = 0x0D
    BACK = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18  # noqa: E741
    P = 0x19
    LBRACKET = 0x1A
    RBRACKET = 0x1B
    RETURN = 0x1C
    LCONTROL = 0x1D
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SEMICOLON = 0x27
    APOSTROPHE = 0x28
    GRAVE = 0x29
    LSHIFT = 0x2A
    BACKSLASH = 0x2B
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    COMMA = 0x33
    PERIOD = 0x34
    SLASH = 0x35
    RSHIFT = 0x36
    MULTIPLY = 0x37
    LMENU = 0x38
    SPACE = 0x39
    CAPITAL = 0x3A
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    NUMLOCK = 0x45
    SCROLL = 0x46
    NUMPAD7 = 0x47
    NUMPAD8 = 0x48
    NUMPAD9 = 0x49
    SUBTRACT = 0x4A
    NUMPAD4 = 0x4B
    NUMPAD5 = 0x4C
    NUMPAD6 = 0x4D
    ADD = 0x4E
    NUMPAD1 = 0x4F
    NUMPAD2 = 0x50
    NUMPAD3 = 0x51
    NUMPAD0 = 0x52
    DECIMAL = 0x53
    F11 = 0x57
    F12 = 0x58
    F13 = 0x64
    F14 = 0x65
    F15 = 0x66
    RCONTROL = 0x9D
    DIVIDE = 0xB5
    RMENU = 0xB8
    HOME = 0xC7
    UP = 0xC8
    PRIOR = 0xC9
    LEFT = 0xCB
    RIGHT = 0xCD
    END = 0xCF
    DOWN = 0xD0
    NEXT = 0xD1
    INSERT = 0xD2
    DELETE = 0xD3
    LWIN = 0xDB
    RWIN = 0xDC
    APPS = 0xDD


_KEY_NAMES: dict[str, Key] = {
    # Arrow keys
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    # Modifiers
    "lshift": Key.LSHIFT,
    "rshift": Key.RSHIFT,
    "shift": Key.LSHIFT,
    "lctrl": Key.LCONTROL,
    "rctrl": Key.RCONTROL,
    "ctrl": Key.LCONTROL,
    "lalt": Key.LMENU,
    "ralt": Key.RMENU,
    "alt": Key.LMENU,
    # Special keys
    "space": Key.SPACE,
    "enter": Key.RETURN,
    "return": Key.RETURN,
    "esc": Key.ESCAPE,
    "escape": Key.ESCAPE,
    "tab": Key.TAB,
    "backspace": Key.BACK,
    "delete": Key.DELETE,
    "insert": Key.INSERT,
    "home": Key.HOME,
    "end": Key.END,
    "pageup": Key.PRIOR,
    "pagedown": Key.NEXT,
    # Numbers
    **{str(n): Key[f"NUM_{n}"] for n in range(10)},
    # Letters
    **{letter: Key[letter.upper()] for letter in "qwertyuiopasdfghjklzxcvbnm"},
    # Function keys
    **{f"f{n}": Key[f"F{n}"] for n in range(1, 16)},
    # Numpad
    **{f"numpad{n}": Key[f"NUMPAD{n}"] for n in range(10)},
    "multiply": Key.MULTIPLY,
    "add": Key.ADD,
    "subtract": Key.SUBTRACT,
    "decimal": Key.DECIMAL,
    "divide": Key.DIVIDE,
    # Punctuation
    ";": Key.SEMICOLON,
    "=": Key.EQUALS,
    ",": Key.COMMA,
    "-": Key.MINUS,
    ".": Key.PERIOD,
    "/": Key.SLASH,
    "`": Key.GRAVE,
    "[": Key.LBRACKET,
    "\\": Key.BACKSLASH,
    "]": Key.RBRACKET,
    "'": Key.APOSTROPHE,
    # Locks and system keys
    "capslock": Key.CAPITAL,
    "numlock": Key.NUMLOCK,
    "scrolllock": Key.SCROLL,
    "lwin": Key.LWIN,
    "rwin": Key.RWIN,
    "menu": Key.APPS,
}


@dataclass
class KeyState:
    """Accumulated per-frame state of one key."""

    state: int = KS_IDLE
    timestamp: int = 0

    def apply_press(self, timestamp: int) -> None:
        self.state |= KS_PRESSED
        self.timestamp = timestamp

    def apply_release(self, timestamp: int) -> None:
        self.state |= KS_RELEASED
        self.timestamp = timestamp

    def reset(self) -> None:
        self.state = KS_IDLE
        self.timestamp = 0

    def prepare_next_frame(self) -> None:
        """Clear a key that was released during the frame just finished."""
        if self.state & KS_RELEASED:
            self.state = KS_IDLE


def reset_keyboard_state(keyboard_state: MutableSequence[int]) -> None:
    """Set every key in a game keyboard buffer to idle."""
    keyboard_state[:KEY_COUNT] = bytes([KS_IDLE] * KEY_COUNT)


@dataclass
class InputSystem:
    """Takes over keyboard input while enabled, for deterministic playback."""

    enabled: bool = False
    current_tick: int = 0
    _states: list[KeyState] = field(
        default_factory=lambda: [KeyState() for _ in range(KEY_COUNT)], repr=False
    )
    _held: dict[int, int] = field(default_factory=dict, repr=False)

    def parse_key_string(self, key_string: str) -> list[str]:
        """Split a whitespace separated key list into unique lower-case names."""
        return list(dict.fromkeys(part.lower() for part in key_string.split()))

    def key_code(self, key: str) -> int:
        """Return the scan code of a key name, or 0 if it is unknown."""
        if not key:
            return 0
        return int(_KEY_NAMES.get(key.lower(), 0))

    def is_valid_key(self, key: str) -> bool:
        return self.key_code(key) != 0

    def _codes(self, key_string: str):
        for name in self.parse_key_string(key_string):
            code = self.key_code(name)
            if 0 < code < KEY_COUNT:
                yield code

    def press_keys(self, key_string: str) -> None:
        for code in self._codes(key_string):
            self._states[code].apply_press(self.current_tick)

    def press_keys_one_frame(self, key_string: str) -> None:
        for code in self._codes(key_string):
            self._states[code].apply_press(self.current_tick)
            self._held[code] = 1

    def hold_keys(self, key_string: str, duration_ticks: int) -> None:
        if duration_ticks <= 0:
            return
        for code in self._codes(key_string):
            self._states[code].apply_press(self.current_tick)
            self._held[code] = duration_ticks

    def release_keys(self, key_string: str) -> None:
        for code in self._codes(key_string):
            self._states[code].apply_release(self.current_tick)
            self._held.pop(code, None)

    def release_all_keys(self) -> None:
        for key_state in self._states:
            if key_state.state & KS_PRESSED:
                key_state.apply_release(self.current_tick)
        self._held.clear()

    def reset(self) -> None:
        self.current_tick = 0
        for key_state in self._states:
            key_state.reset()
        self._held.clear()

    def _check_all(self, key_string: str, predicate) -> bool:
        names = self.parse_key_string(key_string)
        if not names:
            return False
        for name in names:
            code = self.key_code(name)
            if not 0 < code < KEY_COUNT:
                return False
            if not predicate(self._states[code].state):
                return False
        return True

    def are_keys_down(self, key_string: str) -> bool:
        return self._check_all(key_string, lambda s: bool(s & KS_PRESSED))

    def are_keys_up(self, key_string: str) -> bool:
        return self._check_all(key_string, lambda s: s == KS_IDLE)

    def are_keys_toggled(self, key_string: str) -> bool:
        return self._check_all(key_string, lambda s: bool(s & KS_RELEASED))

    def available_keys(self) -> list[str]:
        return sorted(_KEY_NAMES)

    def apply(self, current_tick: int, keyboard_state: MutableSequence[int]) -> None:
        """Write the scripted key states into the game's keyboard buffer."""
        if keyboard_state is None or not self.enabled:
            return

        self.current_tick = current_tick

        for code, ticks in list(self._held.items()):
            if ticks == 1:
                self._states[code].apply_release(current_tick)
                del self._held[code]
            else:
                self._held[code] = ticks - 1

        keyboard_state[:KEY_COUNT] = bytes(s.state for s in self._states)

        self.prepare_next_frame()

    def prepare_next_frame(self) -> None:
        for key_state in self._states:
            key_state.prepare_next_frame()