from fastapi import APIRouter, Response, status

from app.api.dependencies import SessionDep
from app.schemas.restaurants import (
    RestaurantCreate,
    RestaurantResponse,
    RestaurantUpdate,
)
from app.services.restaurant_service import RestaurantService

router = APIRouter()


@router.get("", response_model=list[RestaurantResponse])
async def list_restaurants(session: SessionDep) -> list[RestaurantResponse]:
    service = RestaurantService(session)
    restaurants = await service.list_restaurants()
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.get("/name/{name}", response_model=RestaurantResponse)
async def get_restaurant_by_name(name: str, session: SessionDep) -> RestaurantResponse:
    service = RestaurantService(session)
    return RestaurantResponse.model_validate(await service.get_restaurant_by_name(name))


@router.get("/state/{state}", response_model=list[RestaurantResponse])
async def list_restaurants_by_state(
    state: str, session: SessionDep
) -> list[RestaurantResponse]:
    service = RestaurantService(session)
    restaurants = await service.list_restaurants_by_state(state)
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.get("/likename/{subname}", response_model=list[RestaurantResponse])
async def list_restaurants_by_name_like(
    subname: str, session: SessionDep
) -> list[RestaurantResponse]:
    service = RestaurantService(session)
    restaurants = await service.list_restaurants_by_name_like(subname)
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(restaurant_id: int, session: SessionDep) -> RestaurantResponse:
    service = RestaurantService(session)
    return RestaurantResponse.model_validate(await service.get_restaurant(restaurant_id))


@router.post(
    "", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED
)
async def create_restaurant(
    restaurant_data: RestaurantCreate, session: SessionDep, response: Response
) -> RestaurantResponse:
    async with session.begin():
        service = RestaurantService(session)
        restaurant = await service.create_restaurant(restaurant_data)

        response.headers["Location"] = f"/v1/restaurants/{restaurant.id}"
        return RestaurantResponse.model_validate(restaurant)


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
async def replace_restaurant(
    restaurant_id: int, restaurant_data: RestaurantCreate, session: SessionDep
) -> RestaurantResponse:
    async with session.begin():
        service = RestaurantService(session)
        restaurant = await service.replace_restaurant(restaurant_id, restaurant_data)
        return RestaurantResponse.model_validate(restaurant)


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: int, restaurant_data: RestaurantUpdate, session: SessionDep
) -> RestaurantResponse:
    async with session.begin():
        service = RestaurantService(session)
        restaurant = await service.update_restaurant(restaurant_id, restaurant_data)
        return RestaurantResponse.model_validate(restaurant)


@router.delete("/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_restaurant(restaurant_id: int, session: SessionDep) -> Response:
    async with session.begin():
        service = RestaurantService(session)
        await service.delete_restaurant(restaurant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
