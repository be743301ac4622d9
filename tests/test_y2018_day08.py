import pytest

from aocsolve.y2018_day08 import Tree, main, parse_tree

EXAMPLE = [2, 3, 0, 3, 10, 11, 12, 1, 1, 0, 1, 99, 2, 1, 1, 2]


def test_example_checksum():
    assert parse_tree(EXAMPLE).checksum() == 138


def test_example_value():
    assert parse_tree(EXAMPLE).value() == 66


def test_example_structure():
    tree = parse_tree(EXAMPLE)
    assert tree.metadata == [1, 1, 2]
    assert len(tree.children) == 2
    assert tree.children[0].metadata == [10, 11, 12]
    assert tree.children[1].children[0].metadata == [99]


def test_leaf_checksum_equals_value():
    leaf = parse_tree([0, 3, 10, 11, 12])
    assert leaf.metadata == [10, 11, 12]
    assert leaf.checksum() == leaf.value()


def test_trailing_numbers_are_ignored():
    assert parse_tree([0, 1, 7, 99, 5]).metadata == [7]


def test_invalid_child_indexes_count_nothing():
    tree = parse_tree([1, 2, 0, 1, 5, 0, 3])
    assert tree.value() == 0
    assert tree.checksum() == 8


def test_truncated_metadata_raises():
    with pytest.raises(ValueError):
        parse_tree([0, 3, 1])


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        parse_tree([1, 1, 0])


def test_tree_built_by_hand_matches_parse():
    assert parse_tree([1, 1, 0, 1, 4, 1]) == Tree([1], [Tree([4])])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input"
    path.write_text(" ".join(map(str, EXAMPLE)) + "\n")
    assert main([str(path)]) == 0
    tree = parse_tree(EXAMPLE)
    assert capsys.readouterr().out.split() == [str(tree.checksum()), str(tree.value())]