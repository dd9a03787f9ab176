"""Parsing of the texture and colour elements at the top of a scene file."""

from __future__ import annotations

from dataclasses import dataclass

from raycub.config import Color, MapError

WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_ALL_ELEMENTS = ("north", "south", "west", "east", "floor", "ceiling")


@dataclass
class Elements:
    """The six scene elements: texture lines split into words, colour fields."""

    north: list[str]
    south: list[str]
    west: list[str]
    east: list[str]
    floor: list[str]
    ceiling: list[str]


def count_words(text: str, sep: str) -> int:
    """Count the non-empty runs of ``text`` between separators."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_component(text: str) -> int:
    """Parse an unsigned decimal colour component.

    Leading whitespace and one '+' are allowed; anything else that is not
    a digit is rejected. An empty number reads as 0.
    """
    rest = text.lstrip(WHITESPACE)
    if rest.startswith("-"):
        raise MapError(f"negative colour component: {text!r}")
    if rest.startswith("+"):
        rest = rest[1:]
    if any(ch not in _DIGITS for ch in rest):
        raise MapError(f"invalid colour component: {text!r}")
    return int(rest) if rest else 0


def parse_color_fields(line: str, start: int) -> list[str]:
    """Return the comma-separated fields of a colour line from ``start`` on.

    Exactly two commas are required; all whitespace is removed before
    splitting.
    """
    tail = line[start:]
    if tail.count(",") != 2:
        raise MapError(f"colour needs three components: {line!r}")
    compact = "".join(ch for ch in tail if ch not in WHITESPACE)
    return split_words(compact, ",")


def collect_elements(lines: list[str]) -> Elements:
    """Find the NO, SO, WE, EA, F and C elements among the scene lines."""
    found: dict[str, list[str]] = {}
    count = 0
    for line in lines:
        k = len(line) - len(line.lstrip(WHITESPACE))
        head = line[k:k + 1]
        if head in ("F", "C") and line[k + 1:k + 2] == " ":
            found["floor" if head == "F" else "ceiling"] = parse_color_fields(line, k + 1)
            count += 1
            continue
        key = _TEXTURE_KEYS.get(line[k:k + 2])
        if key is None:
            continue
        if count_words(line, " ") != 2:
            raise MapError(f"texture element needs one path: {line!r}")
        found[key] = split_words(line[k:], " ")
        count += 1
    if count != 6:
        raise MapError(f"expected 6 scene elements, found {count}")
    missing = [name for name in _ALL_ELEMENTS if name not in found]
    if missing:
        raise MapError(f"missing scene elements: {', '.join(missing)}")
    return Elements(**found)


def _component(fields: list[str], index: int) -> int:
    if index >= len(fields):
        raise MapError("colour needs three components")
    value = parse_component(fields[index])
    if value > 255:
        raise MapError(f"colour component out of range: {fields[index]!r}")
    return value


def parse_colors(elements: Elements) -> tuple[Color, Color]:
    """Return the floor and ceiling colours as RGB triples."""
    floor: list[int] = []
    ceiling: list[int] = []
    for i in range(3):
        floor.append(_component(elements.floor, i))
        ceiling.append(_component(elements.ceiling, i))
    return (floor[0], floor[1], floor[2]), (ceiling[0], ceiling[1], ceiling[2])