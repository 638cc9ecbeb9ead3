"""
HTTP tests for the product endpoints.
"""

import uuid

BASE = "/api/products"


def create_product(client, **overrides):
    payload = {"name": "Notebook", "description": "A5 dotted", "price_cents": 2490, "stock_quantity": 0}
    payload.update(overrides)
    return client.post(BASE, json=payload)


class TestProductEndpoints:

    def test_create_and_get(self, client):
        response = create_product(client)

        assert response.status_code == 200
        product = client.get(f"{BASE}/{response.json()['id']}").json()
        assert product["name"] == "Notebook"
        assert product["price_cents"] == 2490
        assert product["stock_quantity"] == 0

    def test_stock_defaults_to_zero(self, client):
        product_id = client.post(BASE, json={"name": "Pen", "price_cents": 350}).json()["id"]

        assert client.get(f"{BASE}/{product_id}").json()["stock_quantity"] == 0

    def test_create_invalid(self, client):
        response = client.post(BASE, json={"name": "  ", "price_cents": -1, "stock_quantity": -5})

        assert response.status_code == 400
        assert response.json() == [
            {"property": "name", "message": "name is required"},
            {"property": "price_cents", "message": "price_cents must be zero or positive"},
            {"property": "stock_quantity", "message": "stock_quantity must be zero or positive"},
        ]

    def test_price_is_required(self, client):
        response = client.post(BASE, json={"name": "Pen"})

        assert response.status_code == 400
        assert response.json() == [{"property": "price_cents", "message": "price_cents is required"}]

    def test_duplicate_name(self, client, seed_product):
        response = create_product(client, name="Stapler")

        assert response.status_code == 400
        assert response.json() == [
            {"property": "name", "message": "product name already registered"}
        ]

    def test_list_orders_by_name_then_price(self, client):
        create_product(client, name="pen", price_cents=100)
        create_product(client, name="Eraser", price_cents=50)
        create_product(client, name="Notebook", price_cents=10)

        names = [p["name"] for p in client.get(BASE).json()]

        assert names == ["Eraser", "Notebook", "pen"]

    def test_search_by_description(self, client):
        create_product(client, name="Notebook", description="A5 dotted")
        create_product(client, name="Pen", description="Black gel pen")

        response = client.get(f"{BASE}/pesquisa", params={"filtro": "gel"})

        assert [p["name"] for p in response.json()] == ["Pen"]

    def test_update_keeps_own_name(self, client, seed_product):
        response = client.put(
            f"{BASE}/{seed_product.id}",
            json={"id": str(seed_product.id), "name": "Stapler", "price_cents": 2000, "stock_quantity": 3},
        )

        assert response.status_code == 200
        product = client.get(f"{BASE}/{seed_product.id}").json()
        assert product["price_cents"] == 2000
        assert product["stock_quantity"] == 3

    def test_update_id_mismatch(self, client, seed_product):
        response = client.put(
            f"{BASE}/{seed_product.id}",
            json={"id": str(uuid.uuid4()), "name": "Stapler", "price_cents": 2000},
        )

        assert response.status_code == 400
        assert response.json() == [{"property": "id", "message": "ids do not match"}]

    def test_delete_without_stock(self, client, seed_product):
        response = client.delete(f"{BASE}/{seed_product.id}")

        assert response.status_code == 200
        assert client.get(BASE).json() == []

    def test_delete_with_stock_is_rejected(self, client):
        product_id = create_product(client, stock_quantity=10).json()["id"]

        response = client.delete(f"{BASE}/{product_id}")

        assert response.status_code == 400
        assert response.json() == [
            {
                "property": "stock_quantity",
                "message": "product with stock on hand cannot be deleted",
            }
        ]
        assert client.get(f"{BASE}/{product_id}").status_code == 200

    def test_create_with_price_beyond_integer_range(self, client):
        response = client.post(BASE, json={"name": "Big", "price_cents": 10**20})

        assert response.status_code == 400
        assert response.json() == [
            {"property": "price_cents", "message": f"price_cents must be at most {2**31 - 1}"}
        ]
        assert client.get(BASE).json() == []

    def test_update_with_stock_beyond_integer_range(self, client, seed_product):
        response = client.put(
            f"{BASE}/{seed_product.id}",
            json={
                "id": str(seed_product.id),
                "name": "Stapler",
                "price_cents": 1890,
                "stock_quantity": 10**20,
            },
        )

        assert response.status_code == 400
        assert response.json() == [
            {"property": "stock_quantity", "message": f"stock_quantity must be at most {2**31 - 1}"}
        ]
        assert client.get(f"{BASE}/{seed_product.id}").json()["stock_quantity"] == 0

    def test_largest_integer_is_accepted(self, client):
        response = create_product(client, price_cents=2**31 - 1, stock_quantity=2**31 - 1)

        assert response.status_code == 200
