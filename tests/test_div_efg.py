import pytest

from cfsolve.div_efg import (
    aquarium_height,
    block_sequence,
    forever_winter,
    negatives_positives,
    pictures_with_kittens,
    romantic_glasses,
    teleporters,
    three_sum,
    two_letter_strings,
)


def _water(level, heights):
    return sum(max(0, level - h) for h in heights)


def test_two_letter_strings_single_difference():
    assert two_letter_strings(["ab", "cb"]) == 1


def test_two_letter_strings_identical_words_do_not_count():
    assert two_letter_strings(["ab", "ab", "ab"]) == 0


def test_two_letter_strings_order_invariant():
    words = ["ab", "cb", "db", "aa", "cc", "ab"]
    assert two_letter_strings(words) == two_letter_strings(list(reversed(words)))


def test_two_letter_strings_short_word():
    with pytest.raises(ValueError):
        two_letter_strings(["a", "bc"])


def test_block_sequence_already_blocks():
    assert block_sequence([2, 7, 7, 1, 4]) == 0


def test_block_sequence_bounded_by_length():
    values = [5, 5, 5]
    assert 0 <= block_sequence(values) <= len(values)
    assert block_sequence([]) == 0


@pytest.mark.parametrize(
    "x, heights",
    [(9, [3, 1, 2, 4, 6, 2, 5]), (10, [1, 1, 1]), (1, [1, 4, 3, 4]), (1000, [7])],
)
def test_aquarium_is_highest_affordable_level(x, heights):
    level = aquarium_height(x, heights)
    assert _water(level, heights) <= x
    assert _water(level + 1, heights) > x


def test_aquarium_no_water_is_lowest_column():
    heights = [5, 3, 8]
    assert aquarium_height(0, heights) == min(heights)


def test_negatives_positives_even_negatives_take_abs():
    values = [-1, -2, 3]
    assert negatives_positives(values) == sum(abs(v) for v in values)


def test_negatives_positives_single_negative_stays():
    assert negatives_positives([-5]) == -5


def test_negatives_positives_not_above_abs_sum():
    values = [-3, 4, 5, -7, -1]
    assert negatives_positives(values) <= sum(abs(v) for v in values)


def test_romantic_glasses_found():
    assert romantic_glasses([1, 1]) is True


def test_romantic_glasses_not_found():
    assert romantic_glasses([1, 2]) is False


def test_pictures_every_picture_must_be_taken():
    beauties = [5, 1, 3, 10, 1]
    assert pictures_with_kittens(1, len(beauties), beauties) == sum(beauties)


def test_pictures_impossible():
    assert pictures_with_kittens(1, 2, [3, 4, 5]) == -1


def test_pictures_single_pick_takes_best():
    beauties = [1, 100, 1, 1]
    assert pictures_with_kittens(len(beauties), 1, beauties) == max(beauties)


def test_pictures_bad_k():
    with pytest.raises(ValueError):
        pictures_with_kittens(0, 1, [1])


def test_three_sum_found():
    assert three_sum([10, 11, 12]) is True
    assert three_sum([1, 1, 1]) is True


def test_three_sum_not_found():
    assert three_sum([1, 2, 3]) is False


def _snowflake(arms, leaves):
    edges = []
    vertex = 2
    for _ in range(arms):
        arm = vertex
        vertex += 1
        edges.append((1, arm))
        for _ in range(leaves):
            edges.append((arm, vertex))
            vertex += 1
    return vertex - 1, edges


@pytest.mark.parametrize("arms, leaves", [(2, 2), (3, 4), (5, 3)])
def test_forever_winter_recovers_shape(arms, leaves):
    n, edges = _snowflake(arms, leaves)
    assert forever_winter(n, edges) == (arms, leaves)


def test_forever_winter_without_leaf():
    with pytest.raises(ValueError):
        forever_winter(3, [(1, 2), (2, 3), (3, 1)])


def test_teleporters_too_poor():
    assert teleporters(1, [1, 1, 1]) == 0


def test_teleporters_rich_enough_for_all():
    costs = [1, 1, 1]
    assert teleporters(1000, costs) == len(costs)


def test_teleporters_one_affordable():
    assert teleporters(2, [1, 1, 1]) == 1