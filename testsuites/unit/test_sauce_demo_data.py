import pytest

from testsuites.ui_testing.data.sauce_demo import (
    EXPECTED_PRODUCT_COUNT,
    PRODUCTS,
    SORT_OPTIONS,
    URLS,
    VALID_CHECKOUT_INFO,
    parse_price,
    random_checkout_info,
    random_product,
    random_products,
)


def test_catalog_matches_expected_count():
    assert len(PRODUCTS) == EXPECTED_PRODUCT_COUNT
    assert all(p.price.startswith("$") for p in PRODUCTS.values())
    assert [o.value for o in SORT_OPTIONS] == ["az", "za", "lohi", "hilo"]
    assert URLS["inventory"] == "/inventory.html"


@pytest.mark.parametrize(
    "text, expected",
    [("$29.99", 29.99), ("Item total: $39.98", 39.98), ("Tax: $3.20", 3.2)],
)
def test_parse_price(text, expected):
    assert parse_price(text) == pytest.approx(expected)


def test_random_helpers_return_catalog_members():
    assert random_checkout_info() in VALID_CHECKOUT_INFO
    assert random_product() in PRODUCTS.values()


def test_random_products_are_distinct_and_capped():
    chosen = random_products(3)
    assert len(chosen) == 3
    assert len({p.id for p in chosen}) == 3

    assert len(random_products(50)) == len(PRODUCTS)
