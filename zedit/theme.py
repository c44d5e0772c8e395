"""Colour themes that map syntax capture names to colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name}={value} outside 0..255")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """An opaque colour."""
        return cls(r, g, b)


Color.WHITE = Color(255, 255, 255)


@dataclass(frozen=True)
class SyntaxTheme:
    """Colours for each kind of syntax element."""

    keyword: Color
    function: Color
    function_call: Color
    type_name: Color
    string: Color
    number: Color
    comment: Color
    operator: Color
    punctuation: Color
    variable: Color
    constant: Color
    default: Color

    @classmethod
    def dark(cls) -> SyntaxTheme:
        """A dark theme."""
        return cls(
            keyword=Color(198, 120, 221),
            function=Color(97, 175, 239),
            function_call=Color(97, 175, 239),
            type_name=Color(229, 192, 123),
            string=Color(152, 195, 121),
            number=Color(209, 154, 102),
            comment=Color(92, 99, 112),
            operator=Color(86, 182, 194),
            punctuation=Color(171, 178, 191),
            variable=Color(224, 108, 117),
            constant=Color(209, 154, 102),
            default=Color(171, 178, 191),
        )

    @classmethod
    def light(cls) -> SyntaxTheme:
        """A light theme."""
        return cls(
            keyword=Color(166, 38, 164),
            function=Color(64, 120, 242),
            function_call=Color(64, 120, 242),
            type_name=Color(193, 132, 1),
            string=Color(80, 161, 79),
            number=Color(152, 104, 1),
            comment=Color(160, 161, 167),
            operator=Color(0, 132, 137),
            punctuation=Color(56, 58, 66),
            variable=Color(228, 86, 73),
            constant=Color(152, 104, 1),
            default=Color(56, 58, 66),
        )

    def get_color(self, capture_name: str) -> Color:
        """Colour for a capture name; unknown names get the default colour."""
        attribute = _CAPTURE_ATTRIBUTES.get(capture_name, "default")
        return getattr(self, attribute)


_CAPTURE_ATTRIBUTES = {
    "keyword": "keyword",
    "function": "function",
    "function.method": "function",
    "function.call": "function_call",
    "function.macro": "function_call",
    "type": "type_name",
    "type.builtin": "type_name",
    "string": "string",
    "number": "number",
    "comment": "comment",
    "operator": "operator",
    "punctuation": "punctuation",
    "punctuation.bracket": "punctuation",
    "punctuation.delimiter": "punctuation",
    "variable": "variable",
    "constant": "constant",
    "constant.builtin": "constant",
}