import argparse
import asyncio
from typing import Any, Dict, List

import httpx

PAYMENT_TYPES = ["Cash", "Credit Card", "Mobile Pay"]

RESTAURANTS: List[Dict[str, Any]] = [
    {
        "name": "Apple",
        "address": "123 Main Street",
        "city": "City",
        "state": "ST",
        "telephone": "555-555-1234",
        "seat_capacity": 3,
        "payments": ["Cash", "Credit Card", "Mobile Pay"],
        "menus": [
            {"dish": "Mac and Cheese", "price": 6.95},
            {"dish": "Lasagna", "price": 8.50},
            {"dish": "Meatloaf", "price": 7.77},
            {"dish": "Tacos", "price": 8.49},
            {"dish": "Chef Salad", "price": 12.50},
        ],
    },
    {
        "name": "Eagle Cafe",
        "address": "321 Uptown Drive",
        "city": "Town",
        "state": "ST",
        "telephone": "555-555-5555",
        "seat_capacity": 97,
        "payments": ["Cash"],
        "menus": [
            {"dish": "Tacos", "price": 10.49},
            {"dish": "Barbacoa", "price": 12.75},
        ],
    },
    {
        "name": "Number 1 Eats",
        "address": "565 Side Avenue",
        "city": "Village",
        "state": "ST",
        "telephone": "555-123-1555",
        "seat_capacity": 10,
        "payments": ["Credit Card", "Mobile Pay"],
        "menus": [{"dish": "Pizza", "price": 15.15}],
    },
]


class Seeder:
    def __init__(self, api_url: str, timeout: float = 30.0):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    async def seed(self) -> Dict[str, int]:
        stats = {"payments": 0, "restaurants": 0, "skipped": 0, "failed": 0}

        async with httpx.AsyncClient(base_url=self.api_url, timeout=self.timeout) as client:
            payment_ids = await self._seed_payments(client, stats)

            print("\nCreating restaurants")
            print("-" * 60)
            for restaurant in RESTAURANTS:
                body = dict(restaurant)
                body["payments"] = [
                    {"id": payment_ids[payment_type]}
                    for payment_type in restaurant["payments"]
                    if payment_type in payment_ids
                ]
                response = await client.post("/v1/restaurants", json=body)

                if response.status_code == 201:
                    stats["restaurants"] += 1
                    print(f"Created restaurant {restaurant['name']} -> {response.headers.get('Location')}")
                elif response.status_code == 409:
                    stats["skipped"] += 1
                    print(f"Restaurant {restaurant['name']} already exists")
                else:
                    stats["failed"] += 1
                    print(f"Failed {restaurant['name']} - {response.status_code}: {response.text[:200]}")

        return stats

    async def _seed_payments(
        self, client: httpx.AsyncClient, stats: Dict[str, int]
    ) -> Dict[str, int]:
        print("Creating payment methods")
        print("-" * 60)
        for payment_type in PAYMENT_TYPES:
            response = await client.post("/v1/payments", json={"type": payment_type})
            if response.status_code == 201:
                stats["payments"] += 1
                print(f"Created payment {payment_type}")
            elif response.status_code == 409:
                stats["skipped"] += 1
                print(f"Payment {payment_type} already exists")
            else:
                stats["failed"] += 1
                print(f"Failed {payment_type} - {response.status_code}: {response.text[:200]}")

        response = await client.get("/v1/payments")
        response.raise_for_status()
        return {payment["type"]: payment["id"] for payment in response.json()}


async def main() -> None:
    parser = argparse.ArgumentParser(description="Seed payments and restaurants through the API")
    parser.add_argument("--api-url", default="http://localhost:8000")
    args = parser.parse_args()

    stats = await Seeder(args.api_url).seed()

    print("\n" + "=" * 60)
    print(
        f"Payments: {stats['payments']}  Restaurants: {stats['restaurants']}  "
        f"Skipped: {stats['skipped']}  Failed: {stats['failed']}"
    )
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
