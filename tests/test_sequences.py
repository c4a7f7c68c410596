import pytest

from cpkit.sequences import (
    Project,
    edit_distance,
    longest_increasing_subsequence,
    max_project_reward,
    removal_game,
)


def test_edit_distance_example():
    assert edit_distance("LOVE", "MOVIE") == 2


@pytest.mark.parametrize("word", ["", "a", "abc", "banana"])
def test_edit_distance_identity(word):
    assert edit_distance(word, word) == 0


@pytest.mark.parametrize("word", ["a", "abc", "banana"])
def test_edit_distance_against_empty(word):
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize(
    "s, t", [("kitten", "sitting"), ("flaw", "lawn"), ("abc", "xyz"), ("a", "ab")]
)
def test_edit_distance_symmetric_and_bounded(s, t):
    forward = edit_distance(s, t)
    assert forward == edit_distance(t, s)
    assert abs(len(s) - len(t)) <= forward <= max(len(s), len(t))


def test_edit_distance_triangle_inequality():
    a, b, c = "sunday", "saturday", "monday"
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_lis_example():
    assert longest_increasing_subsequence([7, 3, 5, 3, 6, 2, 9, 8]) == 4


def test_lis_sorted_and_reversed():
    values = list(range(10))
    assert longest_increasing_subsequence(values) == len(values)
    assert longest_increasing_subsequence(reversed(values)) == 1


def test_lis_is_strict():
    assert longest_increasing_subsequence([5, 5, 5, 5]) == 1


def test_lis_empty():
    assert longest_increasing_subsequence([]) == 0


def test_removal_game_example():
    assert removal_game([4, 5, 1, 3]) == 8


def test_removal_game_small_cases():
    assert removal_game([9]) == 9
    assert removal_game([2, 11]) == 11


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [10, 1, 1, 10], [3, 9, 1, 2, 7, 5]])
def test_removal_game_even_length_gets_half(values):
    score = removal_game(values)
    assert 2 * score >= sum(values)
    assert score <= sum(values)


def test_removal_game_empty_raises():
    with pytest.raises(ValueError):
        removal_game([])


def test_projects_example():
    projects = [Project(2, 4, 4), Project(3, 6, 6), Project(6, 8, 2), Project(5, 7, 3)]
    assert max_project_reward(projects) == 7


def test_projects_touching_days_overlap():
    assert max_project_reward([Project(1, 2, 5), Project(2, 3, 7)]) == 7


def test_projects_disjoint_add_up():
    projects = [Project(1, 2, 5), Project(3, 4, 7), Project(5, 9, 1)]
    assert max_project_reward(projects) == 5 + 7 + 1


def test_projects_order_does_not_matter():
    projects = [Project(2, 4, 4), Project(3, 6, 6), Project(6, 8, 2), Project(5, 7, 3)]
    assert max_project_reward(projects) == max_project_reward(list(reversed(projects)))


def test_projects_empty():
    assert max_project_reward([]) == 0