"""Tests for the per-user cart."""

from decimal import Decimal

from sqlalchemy import func, select, update

from shopwave.core.database import AsyncSessionLocal
from shopwave.models import CartItem, Product
from shopwave.services.cart_service import CartService, price_breakdown


class TestCartMerge:
    """Adding a product already in the cart merges into one line."""

    async def test_repeat_add_merges_quantities(self, client, auth_headers, make_product):
        product = await make_product(price=Decimal("19.99"))
        headers = auth_headers()

        first = await client.post("/api/v1/cart", json={"product_id": product.id, "quantity": 2}, headers=headers)
        second = await client.post("/api/v1/cart", json={"product_id": product.id, "quantity": 1}, headers=headers)

        assert first.json() == {"success": True, "action": "added"}
        assert second.json() == {"success": True, "action": "updated"}

        cart = (await client.get("/api/v1/cart", headers=headers)).json()
        assert len(cart) == 1
        assert cart[0]["quantity"] == 3
        assert cart[0]["product"]["name"] == product.name

    async def test_merged_line_totals(self, db_session, make_product):
        product = await make_product(price=Decimal("19.99"))
        service = CartService(db_session)

        await service.add_item("user-1", product.id, 2)
        await service.add_item("user-1", product.id, 1)

        totals = await service.get_cart_totals("user-1")
        assert totals["subtotal"] == Decimal("59.97")
        assert totals["total_items"] == 3

    async def test_quantity_defaults_to_one(self, client, auth_headers, make_product):
        product = await make_product()
        headers = auth_headers()

        await client.post("/api/v1/cart", json={"product_id": product.id}, headers=headers)

        cart = (await client.get("/api/v1/cart", headers=headers)).json()
        assert cart[0]["quantity"] == 1

    async def test_add_unknown_product_is_not_found(self, client, auth_headers):
        response = await client.post("/api/v1/cart", json={"product_id": 404, "quantity": 1}, headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"

    async def test_zero_quantity_add_is_rejected(self, client, auth_headers, make_product):
        product = await make_product()

        response = await client.post(
            "/api/v1/cart", json={"product_id": product.id, "quantity": 0}, headers=auth_headers()
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert any(d["field"] == "quantity" for d in error["details"])


class TestSetQuantity:

    async def _add(self, client, headers, product_id, quantity=2):
        await client.post("/api/v1/cart", json={"product_id": product_id, "quantity": quantity}, headers=headers)
        cart = (await client.get("/api/v1/cart", headers=headers)).json()
        return cart[0]["id"]

    async def test_sets_quantity(self, client, auth_headers, make_product):
        product = await make_product()
        headers = auth_headers()
        item_id = await self._add(client, headers, product.id)

        response = await client.put(f"/api/v1/cart/{item_id}", json={"quantity": 7}, headers=headers)

        assert response.json()["action"] == "updated"
        cart = (await client.get("/api/v1/cart", headers=headers)).json()
        assert cart[0]["quantity"] == 7

    async def test_zero_removes_line(self, client, auth_headers, make_product):
        product = await make_product()
        headers = auth_headers()
        item_id = await self._add(client, headers, product.id)

        response = await client.put(f"/api/v1/cart/{item_id}", json={"quantity": 0}, headers=headers)

        assert response.json()["action"] == "deleted"
        assert (await client.get("/api/v1/cart", headers=headers)).json() == []

    async def test_negative_quantity_is_rejected(self, client, auth_headers, make_product):
        product = await make_product()
        headers = auth_headers()
        item_id = await self._add(client, headers, product.id)

        response = await client.put(f"/api/v1/cart/{item_id}", json={"quantity": -1}, headers=headers)

        assert response.status_code == 422

    async def test_other_users_line_is_untouched(self, client, auth_headers, make_product):
        product = await make_product()
        owner = auth_headers("owner")
        item_id = await self._add(client, owner, product.id, quantity=2)

        update_response = await client.put(
            f"/api/v1/cart/{item_id}", json={"quantity": 9}, headers=auth_headers("intruder")
        )
        delete_response = await client.delete(f"/api/v1/cart/{item_id}", headers=auth_headers("intruder"))

        assert update_response.status_code == 200
        assert delete_response.status_code == 200
        cart = (await client.get("/api/v1/cart", headers=owner)).json()
        assert cart[0]["quantity"] == 2


class TestRemoveAndClear:

    async def test_remove_is_idempotent(self, client, auth_headers, make_product):
        product = await make_product()
        headers = auth_headers()
        await client.post("/api/v1/cart", json={"product_id": product.id}, headers=headers)
        item_id = (await client.get("/api/v1/cart", headers=headers)).json()[0]["id"]

        for _ in range(2):
            response = await client.delete(f"/api/v1/cart/{item_id}", headers=headers)
            assert response.status_code == 200
            assert response.json() == {"success": True}

        assert (await client.get("/api/v1/cart", headers=headers)).json() == []

    async def test_clear_only_affects_own_cart(self, client, auth_headers, make_product):
        product = await make_product()
        await client.post("/api/v1/cart", json={"product_id": product.id}, headers=auth_headers("a"))
        await client.post("/api/v1/cart", json={"product_id": product.id}, headers=auth_headers("b"))

        await client.delete("/api/v1/cart", headers=auth_headers("a"))
        await client.delete("/api/v1/cart", headers=auth_headers("a"))

        assert (await client.get("/api/v1/cart", headers=auth_headers("a"))).json() == []
        assert len((await client.get("/api/v1/cart", headers=auth_headers("b"))).json()) == 1


class TestTotals:

    async def test_empty_cart(self, client, auth_headers):
        response = await client.get("/api/v1/cart/totals", headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == {
            "subtotal": 0.0,
            "tax": 0.0,
            "shipping": 0.0,
            "total": 0.0,
            "total_items": 0,
        }

    async def test_totals_endpoint(self, client, auth_headers, make_product):
        product = await make_product(price=Decimal("19.99"))
        headers = auth_headers()
        await client.post("/api/v1/cart", json={"product_id": product.id, "quantity": 3}, headers=headers)

        data = (await client.get("/api/v1/cart/totals", headers=headers)).json()

        assert data["subtotal"] == 59.97
        assert data["tax"] == 6.0
        assert data["total"] == 65.97
        assert data["total_items"] == 3

    async def test_price_is_read_live(self, db_session, make_product):
        product = await make_product(price=Decimal("10.00"))
        service = CartService(db_session)
        await service.add_item("user-1", product.id, 2)

        async with AsyncSessionLocal() as session:
            await session.execute(
                update(Product).where(Product.id == product.id).values(price=Decimal("12.50"))
            )
            await session.commit()

        db_session.expire_all()
        totals = await service.get_cart_totals("user-1")
        assert totals["subtotal"] == Decimal("25.00")

    def test_price_breakdown_rounds_half_up(self):
        breakdown = price_breakdown(Decimal("0.05"))

        # 0.055 rounds to 0.06
        assert breakdown["total"] == Decimal("0.06")
        assert breakdown["tax"] == Decimal("0.01")
        assert breakdown["shipping"] == Decimal("0.00")


class TestCartAuth:

    async def test_requires_session(self, client, make_product):
        product = await make_product()

        response = await client.post("/api/v1/cart", json={"product_id": product.id})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

        async with AsyncSessionLocal() as session:
            count = await session.scalar(select(func.count()).select_from(CartItem))
        assert count == 0


class TestCartIdBounds:

    async def test_oversized_product_id_is_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/v1/cart", json={"product_id": 99999999999999999999, "quantity": 1}, headers=auth_headers()
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"][0]["field"] == "product_id"

    async def test_oversized_line_id_is_rejected(self, client, auth_headers):
        headers = auth_headers()

        update_response = await client.put("/api/v1/cart/99999999999999999999", json={"quantity": 1}, headers=headers)
        delete_response = await client.delete("/api/v1/cart/99999999999999999999", headers=headers)

        assert update_response.status_code == 422
        assert delete_response.status_code == 422
