"""Number and vector reading for scene description lines."""

from __future__ import annotations

from dataclasses import dataclass

from minirt.errors import ERR_MISSING, ERR_NOT_NUMERIC, ERR_OVERFLOW, SceneError
from minirt.scene import FLT_MAX
from minirt.vec3 import Vec3

_SPACES = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_NUMBER_START = _DIGITS | frozenset(".+-")


def parse_float(text: str, pos: int) -> tuple[float, int]:
    """Read a decimal number at pos; return its value and the position after it.

    Reading stops at whitespace, at the end of text or at the first character
    that is neither a digit nor a dot.
    """
    j = pos
    sign = 1.0
    if j < len(text) and text[j] in "+-":
        if text[j] == "-":
            sign = -1.0
        j += 1
    whole = 0.0
    frac = 0.0
    div = 1.0
    seen_dot = False
    while j < len(text) and text[j] not in _SPACES:
        ch = text[j]
        if ch == ".":
            if seen_dot:
                raise SceneError(ERR_NOT_NUMERIC)
            seen_dot = True
        elif ch not in _DIGITS:
            break
        else:
            digit = ord(ch) - ord("0")
            if not seen_dot:
                if whole > FLT_MAX / 10 or whole > FLT_MAX - digit:
                    raise SceneError(ERR_OVERFLOW)
                whole = whole * 10 + digit
            else:
                frac = frac * 10 + digit
                div *= 10
        j += 1
    return (whole + frac / div) * sign, j


def is_number_start(text: str, pos: int) -> bool:
    """True when the character at pos can begin a number."""
    return 0 <= pos < len(text) and text[pos] in _NUMBER_START


def has_next_component(text: str, pos: int) -> bool:
    """True when a separator at pos is followed by the start of a number."""
    return pos + 1 < len(text) and text[pos + 1] in _NUMBER_START


def skip_spaces(text: str, pos: int) -> int:
    """Position of the first non-whitespace character at or after pos."""
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    return pos


def in_range(vec: Vec3, maximum: float, minimum: float) -> bool:
    """True when every component lies within [minimum, maximum]."""
    return all(minimum <= c <= maximum for c in (vec.x, vec.y, vec.z))


def is_valid_direction(vec: Vec3) -> bool:
    """True for any non-zero vector."""
    return vec.squared_length() != 0


@dataclass
class LineCursor:
    """Reading position within one line of a scene description."""

    text: str
    pos: int = 0

    def skip_spaces(self) -> None:
        """Advance past whitespace."""
        self.pos = skip_spaces(self.text, self.pos)

    def read_float(self) -> float:
        """Read one number, raising SceneError when none starts here."""
        if not is_number_start(self.text, self.pos):
            raise SceneError(ERR_MISSING)
        value, self.pos = parse_float(self.text, self.pos)
        return value

    def read_vec3(self) -> Vec3:
        """Read three numbers separated by single characters, such as '1,2,3'."""
        components = [self.read_float()]
        for _ in range(2):
            if not has_next_component(self.text, self.pos):
                raise SceneError(ERR_MISSING)
            self.pos += 1
            components.append(self.read_float())
        return Vec3(*components)

    def at_end(self) -> bool:
        """True when the whole line has been consumed."""
        return self.pos >= len(self.text)