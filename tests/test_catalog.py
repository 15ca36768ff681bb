"""
Tests for the Catalog Repository
"""

import pytest

from storefront.errors import (
    ConflictError,
    InvalidIdError,
    NotFoundError,
    SearchQueryTooShort,
    ValidationFailed,
)
from storefront.services.catalog import CatalogRepository, parse_product_id


class TestParseProductId:
    """Tests for product id parsing."""

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("42", 42), (7, 7)])
    def test_valid_ids(self, raw, expected):
        assert parse_product_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "-3", "0", "²", "¹²", "٣", "1" * 5000, 0, -1, True])
    def test_invalid_ids(self, raw):
        with pytest.raises(InvalidIdError):
            parse_product_id(raw)


class TestSeededCatalog:
    """Tests for the default catalog contents."""

    def test_seed_counts(self, catalog):
        assert len(catalog.list_products()) == 20
        assert len(catalog.list_categories()) == 7

    def test_ids_start_at_one(self, catalog):
        ids = [p.id for p in catalog.list_products()]
        assert ids == list(range(1, 21))

    def test_subcategories_point_at_fashion(self, catalog):
        fashion = catalog.get_category_by_slug("fashion")
        children = catalog.categories.get_children(fashion.id)
        assert sorted(c.slug for c in children) == ["kids", "men", "women"]
        assert len(catalog.categories.get_top_level()) == 4

    def test_unseeded_is_empty(self, empty_catalog):
        assert empty_catalog.list_products() == []
        assert empty_catalog.list_categories() == []
        assert empty_catalog.get_page("about").title == "About Trossachs"


class TestProducts:
    """Tests for product lookup and mutation."""

    def test_get_product(self, catalog):
        product = catalog.get_product(1)
        assert product.name == "Embroidered Senator Outfit"
        assert product.price == 12500

    def test_get_missing_product(self, catalog):
        assert catalog.get_product(999) is None
        with pytest.raises(NotFoundError):
            catalog.require_product("999")

    def test_category_is_case_insensitive(self, catalog):
        lower = catalog.list_products_by_category("skincare")
        upper = catalog.list_products_by_category("SKINCARE")
        assert len(lower) == 6
        assert [p.id for p in lower] == [p.id for p in upper]

    def test_unknown_category_is_empty(self, catalog):
        assert catalog.list_products_by_category("Groceries") == []

    def test_search_matches_name_and_description(self, catalog):
        results = catalog.search_products("ankara")
        assert {p.name for p in results} == {"Ankara Print Maxi Dress", "Kids Ankara Set"}

    def test_search_matches_subcategory(self, catalog):
        results = catalog.search_products("kids")
        assert any(p.sub_category == "Kids" for p in results)

    @pytest.mark.parametrize("query", ["", "a"])
    def test_search_too_short(self, catalog, query):
        with pytest.raises(SearchQueryTooShort):
            catalog.search_products(query)

    def test_search_no_match(self, catalog):
        assert catalog.search_products("zzzz") == []

    def test_create_product_assigns_next_id(self, catalog, sample_product):
        product = catalog.create_product(sample_product)
        assert product.id == 21
        assert catalog.get_product(21) == product
        assert product.sub_category == "Men"

    def test_create_product_accepts_snake_case(self, empty_catalog):
        product = empty_catalog.create_product({
            "name": "Kettle",
            "description": "Electric kettle",
            "price": 9000,
            "image_url": "https://example.com/k.jpg",
            "category": "Appliances",
            "is_best_seller": True,
        })
        assert product.id == 1
        assert product.is_best_seller is True

    def test_create_product_ignores_client_id(self, catalog, sample_product):
        product = catalog.create_product({**sample_product, "id": 3})
        assert product.id == 21
        assert catalog.get_product(3).name == "Kids Ankara Set"

    @pytest.mark.parametrize("bad", [
        {"price": -1},
        {"price": 12.5},
        {"price": "14000"},
        {"name": ""},
        {"rating": 6},
    ])
    def test_create_product_rejects_invalid(self, catalog, sample_product, bad):
        with pytest.raises(ValidationFailed):
            catalog.create_product({**sample_product, **bad})
        assert len(catalog.list_products()) == 20

    def test_create_product_reports_missing_fields(self, empty_catalog):
        with pytest.raises(ValidationFailed) as exc_info:
            empty_catalog.create_product({"name": "Nameless"})
        assert "price" in exc_info.value.fields
        assert "imageUrl" in exc_info.value.fields

    def test_failed_create_does_not_consume_id(self, empty_catalog, sample_product):
        with pytest.raises(ValidationFailed):
            empty_catalog.create_product({**sample_product, "price": -5})
        assert empty_catalog.create_product(sample_product).id == 1

    def test_update_is_partial(self, catalog):
        before = catalog.get_product(7)
        updated = catalog.update_product(7, {"price": 8000})
        assert updated.price == 8000
        assert updated.name == before.name
        assert updated.old_price == before.old_price
        assert catalog.get_product(7).price == 8000

    def test_update_cannot_change_id(self, catalog):
        updated = catalog.update_product(2, {"id": 99, "isNew": False})
        assert updated.id == 2
        assert updated.is_new is False
        assert catalog.get_product(99) is None

    def test_update_missing_product(self, catalog):
        assert catalog.update_product(999, {"price": 1}) is None

    def test_update_rejects_invalid_merge(self, catalog):
        with pytest.raises(ValidationFailed):
            catalog.update_product(1, {"price": -100})
        assert catalog.get_product(1).price == 12500


class TestCategories:
    """Tests for categories."""

    def test_slug_lookup_is_case_insensitive(self, catalog):
        assert catalog.get_category_by_slug("FASHION").name == "Fashion"

    def test_missing_slug(self, catalog):
        assert catalog.get_category_by_slug("groceries") is None
        with pytest.raises(NotFoundError):
            catalog.require_category("groceries")

    def test_create_category(self, catalog):
        category = catalog.create_category({"name": "Groceries", "slug": "groceries"})
        assert category.id == 8
        assert category.parent_id is None

    @pytest.mark.parametrize("data", [
        {"name": "fashion", "slug": "apparel"},
        {"name": "Apparel", "slug": "Fashion"},
    ])
    def test_duplicate_category_conflicts(self, catalog, data):
        with pytest.raises(ConflictError):
            catalog.create_category(data)

    def test_invalid_slug(self, catalog):
        with pytest.raises(ValidationFailed):
            catalog.create_category({"name": "Home & Garden", "slug": "home garden"})


class TestSiteContent:
    """Tests for site settings, hero slides and pages."""

    def test_default_slides(self, catalog):
        slides = catalog.get_hero_slides()
        assert [s.id for s in slides] == [1, 2, 3]

    def test_update_logo_keeps_other_fields(self, catalog):
        settings = catalog.update_site_settings({"logo": {"text": "Trossachs NG"}})
        assert settings.logo.text == "Trossachs NG"
        assert settings.logo.image_url == ""
        assert settings.footer.company_name == "Trossachs Nigeria Ltd."

    def test_update_social_links_merges(self, catalog):
        settings = catalog.update_site_settings(
            {"footer": {"socialLinks": {"twitter": "https://x.com/trossachs"}}}
        )
        assert settings.footer.social_links.twitter == "https://x.com/trossachs"
        assert settings.footer.social_links.facebook == "https://facebook.com/trossachs"
        assert settings.footer.phone == "+234 800 123 4567"

    def test_update_hero_carousel_replaces(self, catalog):
        settings = catalog.update_site_settings({"heroCarousel": [
            {"id": 9, "imageUrl": "https://example.com/h.jpg", "title": "Sale"},
        ]})
        assert [s.id for s in settings.hero_carousel] == [9]

    def test_replace_hero_slides_requires_list(self, catalog):
        with pytest.raises(ValidationFailed):
            catalog.replace_hero_slides({"id": 1})
        assert len(catalog.get_hero_slides()) == 3

    def test_replace_hero_slides_validates_each_slide(self, catalog):
        with pytest.raises(ValidationFailed):
            catalog.replace_hero_slides([{"id": 1}])
        assert len(catalog.get_hero_slides()) == 3

    def test_replace_hero_slides_with_empty_list(self, catalog):
        assert catalog.replace_hero_slides([]) == []

    def test_get_page(self, catalog):
        assert catalog.get_page("contact").title == "Contact Us"
        with pytest.raises(NotFoundError):
            catalog.get_page("faq")

    def test_update_page_merges_and_stamps(self, catalog):
        before = catalog.get_page("about")
        page = catalog.update_page("about", {"title": "Who We Are"})
        assert page.title == "Who We Are"
        assert page.content == before.content
        assert page.last_updated > before.last_updated
        assert catalog.get_page("about").title == "Who We Are"

    def test_update_missing_page(self, catalog):
        with pytest.raises(NotFoundError):
            catalog.update_page("faq", {"title": "FAQ"})

    def test_close_resets(self):
        catalog = CatalogRepository()
        catalog.update_site_settings({"logo": {"text": "Changed"}})
        catalog.close()
        assert catalog.list_products() == []
        assert catalog.get_site_settings().logo.text == "Trossachs"
