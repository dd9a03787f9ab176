import pytest

from raycub.config import MapError
from raycub.mapfile import (
    check_texture_paths,
    count_spawns,
    find_player,
    first_row_closed,
    has_cub_extension,
    has_empty_lines,
    map_closed,
    map_lines,
    parse_map_file,
    parse_map_text,
    read_text,
    rows_closed,
)

GRID = ["111111", "100001", "10N001", "111111"]


@pytest.fixture
def texture(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text("texture")
    return str(path)


def make_scene(texture, grid=GRID, floor="220,100,0", ceiling="225,30,0"):
    header = [
        f"NO {texture}",
        f"SO {texture}",
        f"WE {texture}",
        f"EA {texture}",
        f"F {floor}",
        f"C {ceiling}",
        "",
    ]
    return "\n".join(header + list(grid)) + "\n"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.cub", True),
        (".cub", True),
        ("level.cub.txt", False),
        ("level", False),
        ("level.cubx", False),
    ],
)
def test_has_cub_extension(path, expected):
    assert has_cub_extension(path) is expected


def test_read_text_round_trip(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("abc\ndef\n")
    assert read_text(path) == "abc\ndef\n"


def test_read_text_empty_file(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("")
    with pytest.raises(MapError):
        read_text(path)


def test_read_text_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_text(tmp_path / "absent.cub")


def test_map_lines_starts_at_first_wall_row():
    lines = ["NO x", "F 1,2,3", "  1111", "1001"]
    assert map_lines(lines) == ["  1111", "1001"]


def test_map_lines_without_map():
    assert map_lines(["NO x", "C 1,2,3"]) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\n\nb", True),
        ("a\n \t\nb", True),
        ("a\nb\n", False),
        ("\nabc", False),
    ],
)
def test_has_empty_lines(text, expected):
    assert has_empty_lines(text) is expected


def test_first_row_closed():
    assert first_row_closed("  111 11  ") is True
    assert first_row_closed("1101") is False


def test_rows_closed_accepts_closed_grid():
    assert rows_closed(GRID) is True


def test_rows_closed_rejects_gap_next_to_floor():
    assert rows_closed(["1111", "10 1", "1111"]) is False


def test_rows_closed_rejects_floor_on_last_row():
    assert rows_closed(["111", "101", "101"]) is False


def test_rows_closed_rejects_open_row_end():
    assert rows_closed(["111111", "100000", "111111"]) is False


def test_map_closed():
    assert map_closed(GRID) is True
    assert map_closed([]) is False
    assert map_closed(["1011", "1001", "1111"]) is False


def test_check_texture_paths(texture, tmp_path):
    check_texture_paths([texture, texture])
    with pytest.raises(MapError):
        check_texture_paths([texture, str(tmp_path / "missing.xpm")])


def test_find_player():
    assert find_player(["111", "1W1"]) == (1, 1, "W")


def test_find_player_without_spawn():
    with pytest.raises(MapError):
        find_player(["111", "101"])


def test_count_spawns():
    assert count_spawns("NO a\nSO b\n\n  111\n1N1\n1S1") == 2
    assert count_spawns("NO a") == 0


def test_parse_map_text_valid(texture):
    data = parse_map_text(make_scene(texture))
    assert data.grid == GRID
    assert (data.x_player, data.y_player, data.player_dir) == (2, 2, "N")
    assert data.floor_color == (220, 100, 0)
    assert data.ceiling_color == (225, 30, 0)
    assert data.north_texture == texture
    assert data.east_texture == texture
    assert data.width == len(GRID[0])
    assert data.height == len(GRID)


def test_parse_map_text_open_map(texture):
    grid = ["111111", "100000", "10N001", "111111"]
    with pytest.raises(MapError):
        parse_map_text(make_scene(texture, grid=grid))


def test_parse_map_text_two_spawns(texture):
    grid = ["111111", "1S0001", "10N001", "111111"]
    with pytest.raises(MapError):
        parse_map_text(make_scene(texture, grid=grid))


def test_parse_map_text_no_spawn(texture):
    grid = ["111111", "100001", "100001", "111111"]
    with pytest.raises(MapError):
        parse_map_text(make_scene(texture, grid=grid))


def test_parse_map_text_missing_texture(tmp_path):
    with pytest.raises(MapError):
        parse_map_text(make_scene(str(tmp_path / "missing.xpm")))


def test_parse_map_text_colour_out_of_range(texture):
    with pytest.raises(MapError):
        parse_map_text(make_scene(texture, floor="256,0,0"))


def test_parse_map_text_missing_element(texture):
    text = make_scene(texture).replace(f"EA {texture}\n", "")
    with pytest.raises(MapError):
        parse_map_text(text)


def test_parse_map_file(tmp_path, texture):
    path = tmp_path / "scene.cub"
    path.write_text(make_scene(texture))
    data = parse_map_file(path)
    assert data.grid == GRID
    assert data.player_dir == "N"