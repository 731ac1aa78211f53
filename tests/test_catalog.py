"""Tests for catalog listing, lookup and categories."""

from datetime import datetime
from decimal import Decimal

import pytest

from shopwave.core.exceptions import ProductNotFoundException
from shopwave.services.product_service import ProductService
from shopwave.services.review_service import ReviewService


class TestStockFiltering:
    """Out-of-stock products are hidden from listings but still retrievable."""

    async def test_out_of_stock_excluded_from_every_listing(self, client, make_product):
        in_stock = await make_product(name="Lamp", category="Home", stock=3)
        sold_out = await make_product(name="Lamp Shade", category="Home", stock=0)

        for params in (
            {},
            {"category": "Home"},
            {"search": "lamp"},
            {"sort": "price_asc"},
            {"sort": "price_desc"},
            {"sort": "rating"},
            {"sort": "newest"},
        ):
            response = await client.get("/api/v1/products", params=params)
            assert response.status_code == 200
            ids = [p["id"] for p in response.json()]
            assert in_stock.id in ids
            assert sold_out.id not in ids, params

    async def test_out_of_stock_product_detail_still_returned(self, client, make_product):
        sold_out = await make_product(name="Sold Out", stock=0)

        response = await client.get(f"/api/v1/products/{sold_out.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sold_out.id
        assert data["stock"] == 0
        assert data["average_rating"] == 0
        assert data["review_count"] == 0


class TestFilters:

    async def test_category_is_exact_match(self, client, make_product):
        await make_product(name="Phone", category="Electronics")
        await make_product(name="Phone Case", category="Electronics Accessories")

        response = await client.get("/api/v1/products", params={"category": "Electronics"})

        assert [p["name"] for p in response.json()] == ["Phone"]

    async def test_search_is_case_insensitive_on_name_and_description(self, client, make_product):
        await make_product(name="Wireless Headphones", description="Over-ear")
        await make_product(name="Speaker", description="Pairs with any HEADPHONES jack")
        await make_product(name="Keyboard", description="Mechanical")

        response = await client.get("/api/v1/products", params={"search": "headphones"})

        names = sorted(p["name"] for p in response.json())
        assert names == ["Speaker", "Wireless Headphones"]

    async def test_empty_filter_returns_all_in_stock(self, client, make_product):
        for i in range(3):
            await make_product(name=f"Item {i}")

        response = await client.get("/api/v1/products")

        assert len(response.json()) == 3


class TestSorting:

    @pytest.fixture
    async def products(self, make_product):
        cheap = await make_product(name="Cheap", price=Decimal("5.00"), created_at=datetime(2024, 1, 1))
        mid = await make_product(name="Mid", price=Decimal("20.00"), created_at=datetime(2024, 3, 1))
        pricey = await make_product(name="Pricey", price=Decimal("99.99"), created_at=datetime(2024, 2, 1))
        return cheap, mid, pricey

    async def _names(self, client, sort):
        response = await client.get("/api/v1/products", params={"sort": sort})
        return [p["name"] for p in response.json()]

    async def test_newest_first(self, client, products):
        assert await self._names(client, "newest") == ["Mid", "Pricey", "Cheap"]

    async def test_unknown_sort_behaves_as_newest(self, client, products):
        assert await self._names(client, "bogus") == ["Mid", "Pricey", "Cheap"]

    async def test_price_ascending_and_descending(self, client, products):
        assert await self._names(client, "price_asc") == ["Cheap", "Mid", "Pricey"]
        assert await self._names(client, "price_desc") == ["Pricey", "Mid", "Cheap"]

    async def test_rating_sort_breaks_ties_on_review_count(self, client, db_session, products):
        cheap, mid, pricey = products
        reviews = ReviewService(db_session)
        # Mid: 4.0 over three reviews, Pricey: 4.0 over one, Cheap: unrated
        for user, rating in (("a", 5), ("b", 3), ("c", 4)):
            await reviews.submit_review(user, mid.id, rating)
        await reviews.submit_review("a", pricey.id, 4)

        assert await self._names(client, "rating") == ["Mid", "Pricey", "Cheap"]


class TestDerivedRating:

    async def test_mean_and_count_of_reviews(self, db_session, make_product):
        product = await make_product()
        reviews = ReviewService(db_session)
        for user, rating in (("u1", 5), ("u2", 3), ("u3", 4)):
            await reviews.submit_review(user, product.id, rating)

        data = await ProductService(db_session).get_product(product.id)

        assert data["average_rating"] == 4.0
        assert data["review_count"] == 3

    async def test_rating_appears_in_listing(self, client, db_session, make_product):
        product = await make_product()
        await ReviewService(db_session).submit_review("u1", product.id, 2)

        response = await client.get("/api/v1/products")

        listed = response.json()[0]
        assert listed["average_rating"] == 2.0
        assert listed["review_count"] == 1


class TestGetProduct:

    async def test_missing_product_is_not_found(self, client):
        response = await client.get("/api/v1/products/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    async def test_service_raises_not_found(self, db_session):
        with pytest.raises(ProductNotFoundException):
            await ProductService(db_session).get_product(12345)

    async def test_price_is_serialized_as_number(self, client, make_product):
        product = await make_product(price=Decimal("19.99"))

        response = await client.get(f"/api/v1/products/{product.id}")

        assert response.json()["price"] == pytest.approx(19.99)


class TestCategories:

    async def test_distinct_sorted_non_null(self, client, make_product):
        await make_product(category="Toys")
        await make_product(category="Books")
        await make_product(category="Toys")
        await make_product(category=None)
        await make_product(category="Garden", stock=0)

        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        assert response.json() == ["Books", "Garden", "Toys"]

    async def test_no_products_no_categories(self, client):
        response = await client.get("/api/v1/categories")
        assert response.json() == []


class TestIdBounds:
    """Ids outside the INTEGER column range are rejected before any query runs."""

    @pytest.mark.parametrize("product_id", ["0", "-1", "2147483648", "99999999999999999999"])
    async def test_product_path_out_of_range(self, client, product_id):
        for path in (f"/api/v1/products/{product_id}", f"/api/v1/products/{product_id}/reviews"):
            response = await client.get(path)

            assert response.status_code == 422
            assert response.json()["error"]["details"][0]["field"] == "product_id"

    async def test_largest_valid_id_is_not_found(self, client):
        response = await client.get("/api/v1/products/2147483647")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"
