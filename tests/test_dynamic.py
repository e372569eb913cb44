import math

import pytest

from algosuite.dynamic import (
    climb_stairs,
    coin_change,
    length_of_lis,
    max_product,
    min_cost_climbing_stairs,
    num_decodings,
    rob,
    rob_circular,
    word_break,
)


def test_climb_stairs_base():
    assert climb_stairs(1) == 1
    assert climb_stairs(0) == 1


@pytest.mark.parametrize("n", range(3, 20))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_num_decodings_examples():
    assert num_decodings("12") == 2
    assert num_decodings("226") == 3


@pytest.mark.parametrize("s", ["0", "06", "100", "30"])
def test_num_decodings_impossible(s):
    assert num_decodings(s) == 0


def test_num_decodings_empty():
    assert num_decodings("") == 1


def test_num_decodings_single_path():
    assert num_decodings("33") == 1
    assert num_decodings("10") == 1


def test_word_break_true():
    assert word_break("leetcode", ["leet", "code"]) is True


def test_word_break_joined_words():
    words = ["apple", "pen", "pine"]
    s = "".join(["pine", "apple", "pen", "apple"])
    assert word_break(s, words) is True


def test_word_break_false():
    assert word_break("catsandog", ["cats", "dog", "sand", "and", "cat"]) is False


def test_word_break_empty_dict():
    assert word_break("", []) is False
    assert word_break("a", []) is False


def test_max_product_example():
    assert max_product([2, 3, -2, 4]) == 6


@pytest.mark.parametrize("value", [-5, 0, 7])
def test_max_product_single(value):
    assert max_product([value]) == value


def test_max_product_all_positive():
    nums = [1, 2, 3, 4]
    assert max_product(nums) == math.prod(nums)


def test_max_product_zero_breaks_negatives():
    assert max_product([-2, 0, -1]) == 0


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


def test_rob_empty_and_single():
    assert rob([]) == 0
    assert rob([9]) == 9


@pytest.mark.parametrize("nums", [[1, 2, 3, 1], [2, 7, 9, 3, 1], [5, 1, 1, 5]])
def test_rob_bounds(nums):
    result = rob(nums)
    assert result >= max(nums)
    assert result >= sum(nums[::2])
    assert result <= sum(nums)


def test_rob_circular_single():
    assert rob_circular([4]) == 4


def test_rob_circular_ends_adjacent():
    assert rob_circular([2, 3, 2]) == 3


@pytest.mark.parametrize("nums", [[1, 2, 3, 1], [2, 7, 9, 3, 1], [1, 2, 3]])
def test_rob_circular_not_above_linear(nums):
    assert rob_circular(nums) <= rob(nums)


def test_lis_increasing():
    nums = [1, 2, 5, 9, 10]
    assert length_of_lis(nums) == len(nums)


def test_lis_decreasing():
    assert length_of_lis([9, 7, 3, 1]) == 1


def test_lis_empty():
    assert length_of_lis([]) == 1


def test_lis_bounded():
    nums = [10, 9, 2, 5, 3, 7, 101, 18]
    assert 1 <= length_of_lis(nums) <= len(nums)


def test_coin_change_zero_amount():
    assert coin_change([1, 2, 5], 0) == 0


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


@pytest.mark.parametrize("amount", [1, 4, 13])
def test_coin_change_unit_coins(amount):
    assert coin_change([1], amount) == amount


def test_coin_change_exact_coin():
    assert coin_change([3, 7, 25], 25) == 1


def test_coin_change_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_min_cost_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_single_step():
    assert min_cost_climbing_stairs([7]) == 0


def test_min_cost_does_not_mutate():
    cost = [1, 100, 1, 1, 1, 100, 1, 1, 100, 1]
    copy = list(cost)
    min_cost_climbing_stairs(cost)
    assert cost == copy


def test_min_cost_empty():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([])