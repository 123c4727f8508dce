import pytest

from isowire.colors import get_b, get_g, get_r
from isowire.dot import Dot
from isowire.parsing import (
    HIGH_COLOR,
    LOW_COLOR,
    MapFormatError,
    fill_colors,
    parse_lines,
    parse_map,
    read_map_lines,
)


def _write(tmp_path, text, name="map.fdf"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_map_lines_strips_endings_and_trailing_blanks(tmp_path):
    path = _write(tmp_path, "0 1 2\n3 4 5\n\n\n")
    assert read_map_lines(path) == ["0 1 2", "3 4 5"]


def test_read_map_lines_last_line_without_newline(tmp_path):
    path = _write(tmp_path, "1 2\n3 4")
    assert read_map_lines(path) == ["1 2", "3 4"]


@pytest.mark.parametrize("text", ["", "\n", "\n1 2\n", "1 2\n\n3 4\n"])
def test_read_map_lines_rejects_empty_lines(tmp_path, text):
    path = _write(tmp_path, text)
    with pytest.raises(MapFormatError):
        read_map_lines(path)


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map_lines(tmp_path / "absent.fdf")


def test_parse_lines_positions_and_heights():
    dots = parse_lines(["0 1", "2 3", "4 5"])
    assert [(d.x, d.y, d.z) for d in dots] == [
        (0, 0, 0),
        (1, 0, 1),
        (0, 1, 2),
        (1, 1, 3),
        (0, 2, 4),
        (1, 2, 5),
    ]
    assert all(d.index_x == d.x and d.index_y == d.y for d in dots)


def test_parse_lines_accepts_newlines_and_repeated_spaces():
    dots = parse_lines(["  7   -3 \n", "0 10\n"])
    assert [d.z for d in dots] == [7, -3, 0, 10]


def test_parse_lines_rejects_ragged_rows():
    with pytest.raises(MapFormatError):
        parse_lines(["0 0 0", "0 0"])


@pytest.mark.parametrize("word", ["1,0xFF", "abc", "2147483648", "-2147483649", "3x"])
def test_parse_lines_rejects_bad_values(word):
    with pytest.raises(MapFormatError):
        parse_lines([f"0 {word}", "0 0"])


def test_parse_lines_rejects_no_rows():
    with pytest.raises(MapFormatError):
        parse_lines([])


def test_parse_lines_rejects_rows_without_values():
    with pytest.raises(MapFormatError):
        parse_lines(["   ", "  "])


def test_parse_lines_accepts_int_limits():
    dots = parse_lines(["2147483647 -2147483648"])
    assert [d.z for d in dots] == [2147483647, -2147483648]


def test_parse_map_matches_parse_lines(tmp_path):
    path = _write(tmp_path, "0 0 1\n0 2 1\n")
    from_file = parse_map(path)
    from_lines = parse_lines(["0 0 1", "0 2 1"])
    assert from_file == from_lines


def test_single_floor_uses_low_color():
    dots = parse_lines(["4 4", "4 4"])
    assert {d.color for d in dots} == {0x00FB335B}
    assert {d.index_z for d in dots} == {0}


def test_fill_colors_ranks_distinct_heights():
    dots = [Dot(x=i, y=0, z=z) for i, z in enumerate([10, -5, 10, 3, 20])]
    fill_colors(dots)
    assert [d.index_z for d in dots] == [2, 0, 2, 1, 3]


def test_fill_colors_steps_towards_high_color():
    dots = [Dot(x=i, y=0, z=z) for i, z in enumerate([0, 5, 10, 20, 5, 0])]
    fill_colors(dots)
    by_floor = {d.index_z: d.color for d in dots}
    colors = [by_floor[i] for i in sorted(by_floor)]
    assert colors[0] == LOW_COLOR
    reds = [get_r(c) for c in colors]
    greens = [get_g(c) for c in colors]
    blues = [get_b(c) for c in colors]
    assert reds == sorted(reds, reverse=True)
    assert greens == sorted(greens)
    assert blues == sorted(blues)
    assert min(reds) >= get_r(HIGH_COLOR)
    assert max(greens) <= get_g(HIGH_COLOR)
    assert max(blues) <= get_b(HIGH_COLOR)


def test_fill_colors_equal_heights_share_color():
    dots = parse_lines(["1 2 3", "3 2 1"])
    for a in dots:
        for b in dots:
            if a.z == b.z:
                assert a.color == b.color


def test_fill_colors_rejects_empty():
    with pytest.raises(MapFormatError):
        fill_colors([])