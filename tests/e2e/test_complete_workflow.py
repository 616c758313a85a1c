import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.db.models import Menu, Payment
from app.db.session import AsyncSessionLocal
from tests.utils import RestaurantFactory, dish_names


@pytest.mark.e2e
class TestCompleteWorkflow:
    async def test_complete_restaurant_lifecycle(
        self,
        client: AsyncClient,
    ) -> None:
        # Step 1: Register payment methods
        cash = (await client.post("/v1/payments", json={"type": "Cash"})).json()
        card = (await client.post("/v1/payments", json={"type": "Credit Card"})).json()

        # Step 2: Create a restaurant that accepts both, with two menus
        restaurant_data = RestaurantFactory.create_restaurant_data(
            name="Eagle Cafe",
            seat_capacity=97,
            payment_ids=[cash["id"], card["id"]],
            dishes=[("Tacos", 10.49), ("Barbacoa", 12.75)],
        )
        create_response = await client.post("/v1/restaurants", json=restaurant_data)
        assert create_response.status_code == 201
        restaurant = create_response.json()
        restaurant_url = create_response.headers["Location"]

        # Step 3: Partial update leaves everything not sent untouched
        patch_response = await client.patch(restaurant_url, json={"city": "Uptown"})
        assert patch_response.status_code == 200
        patched = patch_response.json()
        assert patched["city"] == "Uptown"
        assert patched["seat_capacity"] == 97
        assert dish_names(patched) == ["Tacos", "Barbacoa"]

        # Step 4: Swapping the menu list removes the old menus from storage
        swap_response = await client.patch(
            restaurant_url, json={"menus": [{"dish": "Enchiladas", "price": 9.25}]}
        )
        assert dish_names(swap_response.json()) == ["Enchiladas"]

        async with AsyncSessionLocal() as session:
            result = await session.execute(select(Menu.dish))
            assert list(result.scalars().all()) == ["Enchiladas"]

        # Step 5: Closing the restaurant for seating keeps an explicit zero
        zero_response = await client.patch(restaurant_url, json={"seat_capacity": 0})
        assert zero_response.json()["seat_capacity"] == 0

        # Step 6: Deleting the restaurant removes its menus but not the payments
        delete_response = await client.delete(restaurant_url)
        assert delete_response.status_code == 204

        async with AsyncSessionLocal() as session:
            menu_count = await session.execute(select(func.count()).select_from(Menu))
            payment_count = await session.execute(
                select(func.count()).select_from(Payment)
            )
            assert menu_count.scalar_one() == 0
            assert payment_count.scalar_one() == 2

        # Step 7: The name is free again
        recreate = await client.post("/v1/restaurants", json={"name": restaurant["name"]})
        assert recreate.status_code == 201

    async def test_metrics_exposed(self, client: AsyncClient) -> None:
        await client.post("/v1/restaurants", json={"name": "Counted"})

        response = await client.get("/metrics/")

        assert response.status_code == 200
        assert 'restaurant_operations_total{operation="created"}' in response.text

    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
