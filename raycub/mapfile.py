"""Reading and validating scene description (.cub) files."""

from __future__ import annotations

import re
from pathlib import Path

from raycub.config import MapData, MapError
from raycub.elements import WHITESPACE, collect_elements, parse_colors, split_words

_SPAWNS = "NSEW"
_INLINE_WHITESPACE = " \t\v\f\r"
_MAP_START = re.compile(r"\n[ \t\n\v\f\r]*1")
_NEIGHBOURS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def has_cub_extension(path: str) -> bool:
    """Return True if the text after the last '.' in ``path`` is exactly 'cub'."""
    dot = path.rfind(".")
    if dot < 0:
        return False
    return path[dot + 1:] == "cub"


def read_text(path: str | Path) -> str:
    """Return the whole content of a scene file.

    Raises MapError if the file cannot be opened or is empty.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(f"invalid file: {path}") from exc
    if not data:
        raise MapError(f"empty file: {path}")
    return data.decode("latin-1")


def map_lines(lines: list[str]) -> list[str]:
    """Return the lines from the first one whose first visible character is '1'."""
    for index, line in enumerate(lines):
        if line.lstrip(WHITESPACE).startswith("1"):
            return lines[index:]
    return []


def has_empty_lines(text: str) -> bool:
    """Return True if a blank line sits between two newlines in ``text``."""
    return any(
        not line.strip(_INLINE_WHITESPACE) for line in text.split("\n")[1:-1]
    )


def first_row_closed(row: str) -> bool:
    """Check that the first map row holds only walls and spaces."""
    stripped = row.strip(WHITESPACE)
    return all(ch in "1 " for ch in stripped[:-1])


def _is_open(rows: list[str], i: int, j: int) -> bool:
    if not (0 <= i < len(rows)) or not (0 <= j < len(rows[i])):
        return True
    return rows[i][j] == " "


def rows_closed(rows: list[str]) -> bool:
    """Check that every row starts and ends with a wall and no floor touches a gap.

    A floor cell whose neighbour is a space or lies outside the grid is open.
    """
    for i, row in enumerate(rows):
        start = len(row) - len(row.lstrip(WHITESPACE))
        if start == len(row):
            continue
        end = len(row.rstrip(WHITESPACE)) - 1
        if row[start] != "1" or row[end] != "1":
            return False
        for j, cell in enumerate(row[start:end], start):
            if cell == "0" and any(
                _is_open(rows, i + di, j + dj) for di, dj in _NEIGHBOURS
            ):
                return False
    return True


def map_closed(rows: list[str]) -> bool:
    """Check that the map grid is surrounded by walls."""
    if not rows:
        return False
    return first_row_closed(rows[0]) and rows_closed(rows)


def check_texture_paths(paths: list[str]) -> None:
    """Raise MapError unless every texture file can be opened for reading."""
    for path in paths:
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise MapError(f"cannot open texture: {path}") from exc


def find_player(rows: list[str]) -> tuple[int, int, str]:
    """Return the column, row and direction of the first spawn point."""
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell in _SPAWNS:
                return x, y, cell
    raise MapError("map has no spawn point")


def count_spawns(text: str) -> int:
    """Count spawn characters in the map part of a scene text."""
    match = _MAP_START.search(text)
    if match is None:
        return 0
    return sum(1 for ch in text[match.end() - 1:] if ch in _SPAWNS)


def parse_map_text(text: str) -> MapData:
    """Parse and validate the content of a scene file."""
    lines = split_words(text, "\n")
    elements = collect_elements(lines)
    rows = map_lines(lines)
    if not map_closed(rows):
        raise MapError("map is not closed by walls")
    textures = [
        elements.north[1],
        elements.south[1],
        elements.west[1],
        elements.east[1],
    ]
    check_texture_paths(textures)
    floor, ceiling = parse_colors(elements)
    x, y, direction = find_player(rows)
    if count_spawns(text) != 1:
        raise MapError("map needs exactly one spawn point")
    return MapData(
        grid=rows,
        x_player=x,
        y_player=y,
        player_dir=direction,
        north_texture=textures[0],
        south_texture=textures[1],
        west_texture=textures[2],
        east_texture=textures[3],
        floor_color=floor,
        ceiling_color=ceiling,
    )


def parse_map_file(path: str | Path) -> MapData:
    """Read and parse a scene file."""
    return parse_map_text(read_text(path))