"""
Tests for catalog browsing and money helpers
"""

import pytest

from storefront.services.browse import (
    featured_products,
    filter_by_category,
    filter_by_price,
    filter_by_subcategory,
    new_arrivals,
    sort_products,
)
from storefront.services.money import discount_percent, format_price, rating_stars


class TestFilters:
    def test_filter_by_price_inclusive(self, products):
        result = filter_by_price(products, 5500, 7500)
        assert {p.price for p in result} == {5500, 6500, 6800, 7200, 7500}

    @pytest.mark.parametrize("category", [None, "", "all", "ALL"])
    def test_all_categories(self, products, category):
        assert len(filter_by_category(products, category)) == 20

    def test_filter_by_category(self, products):
        assert len(filter_by_category(products, "utilities")) == 4

    def test_filter_by_subcategory(self, products):
        fashion = filter_by_category(products, "Fashion")
        men = filter_by_subcategory(fashion, "men")
        assert [p.id for p in men] == [1, 3, 6]
        assert len(filter_by_subcategory(fashion, "all")) == 6


class TestSorting:
    def test_featured_keeps_order(self, products):
        assert sort_products(products) == products

    def test_price_low_to_high(self, products):
        prices = [p.price for p in sort_products(products, "price-low")]
        assert prices == sorted(prices)
        assert prices[0] == 5500

    def test_price_high_to_low(self, products):
        assert sort_products(products, "price-high")[0].price == 85000

    def test_rating(self, products):
        assert sort_products(products, "rating")[0].rating == 5.0

    def test_newest_is_stable(self, products):
        ordered = sort_products(products, "newest")
        new_ids = [p.id for p in ordered if p.is_new]
        assert [p.id for p in ordered[:len(new_ids)]] == new_ids
        assert new_ids == sorted(new_ids)

    def test_bestseller_first(self, products):
        assert [p.id for p in sort_products(products, "bestseller")[:3]] == [7, 9, 15]

    def test_unknown_option(self, products):
        with pytest.raises(ValueError):
            sort_products(products, "cheapest")

    def test_does_not_mutate_input(self, products):
        before = [p.id for p in products]
        sort_products(products, "price-high")
        assert [p.id for p in products] == before


class TestCuration:
    def test_featured_products_are_best_sellers(self, products):
        assert [p.id for p in featured_products(products)] == [7, 9, 15]

    def test_new_arrivals_limit(self, products):
        assert len(new_arrivals(products)) == 4
        assert all(p.is_new for p in new_arrivals(products, limit=2))


class TestMoney:
    @pytest.mark.parametrize("price,expected", [
        (12500, "₦12,500"),
        (0, "₦0"),
        (850000, "₦850,000"),
    ])
    def test_format_price(self, price, expected):
        assert format_price(price) == expected

    def test_discount_percent(self):
        assert discount_percent(8750, 10000) == 13
        assert discount_percent(8750, None) == 0
        assert discount_percent(10000, 8750) == 0

    @pytest.mark.parametrize("rating,expected", [
        (4.5, (4, 1, 0)),
        (4.2, (4, 0, 1)),
        (5.0, (5, 0, 0)),
        (0, (0, 0, 5)),
        (3.5, (3, 1, 1)),
    ])
    def test_rating_stars(self, rating, expected):
        assert rating_stars(rating) == expected
