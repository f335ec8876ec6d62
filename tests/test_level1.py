import pytest

from wordgrid_puzzles.level1 import (
    main,
    parse_lists,
    similarity_score,
    total_distance,
)

EXAMPLE = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]


def test_parse_lists_splits_columns():
    assert parse_lists(["3   4\n", "4   3\n"]) == ([3, 4], [4, 3])


def test_parse_lists_skips_blank_lines():
    assert parse_lists(["1 2", "", "   ", "3 4"]) == ([1, 3], [2, 4])


@pytest.mark.parametrize("line", ["1", "a b", "1 x"])
def test_parse_lists_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_lists([line])


def test_total_distance_example():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11


def test_total_distance_identical_lists_is_zero():
    assert total_distance([5, 1, 9], [9, 5, 1]) == 0


def test_total_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_total_distance_ignores_order():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(
        list(reversed(left)), sorted(right)
    )


def test_total_distance_length_mismatch():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_score_example():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_similarity_ignores_unmatched_left_values():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left + [1000], right) == similarity_score(left, right)


def test_similarity_ignores_order():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(sorted(left), list(reversed(right))) == similarity_score(
        left, right
    )


def test_similarity_empty_right_matches_empty_left():
    assert similarity_score([1, 2, 3], []) == similarity_score([], [1, 2, 3])


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    left, right = parse_lists(EXAMPLE)
    assert capsys.readouterr().out.strip() == str(similarity_score(left, right))


def test_main_part_one(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path), "--part", "1"]) == 0
    left, right = parse_lists(EXAMPLE)
    assert capsys.readouterr().out.strip() == str(total_distance(left, right))