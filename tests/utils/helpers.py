from typing import List

from httpx import AsyncClient


async def create_restaurants(
    client: AsyncClient,
    restaurants: List[dict],
) -> List[dict]:
    """Create several restaurants and return their response bodies."""
    responses = []
    for restaurant in restaurants:
        response = await client.post("/v1/restaurants", json=restaurant)
        assert response.status_code == 201, response.text
        responses.append(response.json())
    return responses


def dish_names(restaurant: dict) -> List[str]:
    return [menu["dish"] for menu in restaurant["menus"]]
