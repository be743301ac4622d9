import pytest

from aocsolve.y2020_day03 import (
    SLOPES,
    Slope,
    Tile,
    count_trees,
    main,
    parse_map,
    slope_product,
)

EXAMPLE = [
    "..##.......",
    "#...#...#..",
    ".#....#..#.",
    "..#.#...#.#",
    ".#...##..#.",
    "..#.##.....",
    ".#.#.#....#",
    ".#........#",
    "#.##...#...",
    "#...##....#",
    ".#..#...#.#",
]


def test_tile_from_char():
    assert Tile.from_char("#") is Tile.TREE
    assert Tile.from_char(".") is Tile.SPACE
    with pytest.raises(ValueError):
        Tile.from_char("x")


def test_parse_map_reads_tiles():
    tree_map = parse_map(["#.", ".#"])
    assert tree_map.rows == ((Tile.TREE, Tile.SPACE), (Tile.SPACE, Tile.TREE))


def test_parse_map_skips_bad_and_blank_lines():
    tree_map = parse_map(["#.", "", "#x", ".#"])
    assert len(tree_map) == 2


@pytest.mark.parametrize("column", [0, 3, 11, 25])
def test_tile_wraps_columns(column):
    tree_map = parse_map(EXAMPLE)
    width = len(EXAMPLE[0])
    assert tree_map.tile(1, column) is tree_map.tile(1, column + width)


def test_tile_matches_text():
    tree_map = parse_map(EXAMPLE)
    assert all(
        (tree_map.tile(r, c) is Tile.TREE) == (char == "#")
        for r, line in enumerate(EXAMPLE)
        for c, char in enumerate(line)
    )


def test_count_trees_example():
    assert count_trees(parse_map(EXAMPLE), Slope(3, 1)) == 7


def test_slope_product_example():
    assert slope_product(parse_map(EXAMPLE)) == 336


def test_slope_product_is_product_of_counts():
    tree_map = parse_map(EXAMPLE)
    counts = [count_trees(tree_map, slope) for slope in SLOPES[:2]]
    assert slope_product(tree_map, SLOPES[:2]) == counts[0] * counts[1]


def test_straight_down_counts_first_column():
    tree_map = parse_map(EXAMPLE)
    assert count_trees(tree_map, Slope(0, 1)) == sum(line[0] == "#" for line in EXAMPLE)


@pytest.mark.parametrize("slope", [Slope(1, 0), Slope(-1, 1)])
def test_invalid_slope_raises(slope):
    with pytest.raises(ValueError):
        count_trees(parse_map(EXAMPLE), slope)


def test_main_prints_product(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(slope_product(parse_map(EXAMPLE)))