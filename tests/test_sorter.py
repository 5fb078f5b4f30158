"""Tests for the price sort used by the menu listing."""

import random
from decimal import Decimal

from food_palace import MenuEntry, sort_by_price


def entries(*prices):
    return [MenuEntry(i, f"dish {i}", Decimal(p)) for i, p in enumerate(prices, start=1)]


class TestSortByPrice:
    """Output is ascending, a permutation of the input and stable."""

    def test_empty_and_single(self):
        assert sort_by_price([]) == []
        one = entries("5")
        assert sort_by_price(one) == one

    def test_ascending_permutation(self):
        rng = random.Random(42)
        items = entries(*(str(rng.randint(1, 50)) for _ in range(60)))
        result = sort_by_price(items)
        assert sorted(e.item_id for e in result) == sorted(e.item_id for e in items)
        prices = [e.price for e in result]
        assert prices == sorted(prices)

    def test_ties_keep_insertion_order(self):
        items = entries("20", "10", "20", "10", "20")
        result = sort_by_price(items)
        assert [e.item_id for e in result] == [2, 4, 1, 3, 5]

    def test_pivot_ties_keep_insertion_order(self):
        items = entries("7", "3", "7")
        assert [e.item_id for e in sort_by_price(items)] == [2, 1, 3]

    def test_already_sorted_and_reversed(self):
        forward = entries(*(str(n) for n in range(1, 40)))
        backward = list(reversed(forward))
        assert sort_by_price(forward) == forward
        assert sort_by_price(backward) == forward

    def test_input_left_untouched(self):
        items = entries("3", "1", "2")
        before = list(items)
        sort_by_price(items)
        assert items == before

    def test_long_ascending_input(self):
        items = entries(*(str(n) for n in range(1, 2001)))
        assert sort_by_price(items) == items

    def test_long_descending_input(self):
        items = entries(*(str(n) for n in range(2000, 0, -1)))
        assert [e.price for e in sort_by_price(items)] == [Decimal(n) for n in range(1, 2001)]
