from itertools import accumulate

from cpkit.subsets import money_sums


def test_money_sums_example():
    assert money_sums([4, 2, 5, 2]) == [2, 4, 5, 6, 7, 8, 9, 11, 13]


def test_money_sums_single_coin():
    assert money_sums([6]) == [6]


def test_money_sums_empty():
    assert money_sums([]) == []


def test_money_sums_powers_of_two_cover_range():
    coins = [1, 2, 4, 8]
    assert money_sums(coins) == list(range(1, sum(coins) + 1))


def test_money_sums_bounds_and_order():
    coins = [3, 7, 7, 12, 1]
    sums = money_sums(coins)
    assert sums[0] == min(coins)
    assert sums[-1] == sum(coins)
    assert sums == sorted(set(sums))


def test_money_sums_contain_every_prefix_total():
    coins = [5, 9, 2, 14]
    sums = set(money_sums(coins))
    assert set(accumulate(coins)) <= sums
    assert set(coins) <= sums


def test_money_sums_equal_coins():
    assert money_sums([3, 3, 3]) == [3, 6, 9]