"""Daily stamp routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from diu.application.usecase.stamp import (
    GetMyStampsUseCase,
    MyStampsResponse,
    StampTodayResponse,
    StampTodayUseCase,
)
from diu.domain.service import JWTService
from diu.interface.api.dependencies import get_auth_token, require_user_id

router = APIRouter(prefix="/stamps", tags=["stamps"], route_class=DishkaRoute)


@router.post("/today", response_model=StampTodayResponse)
async def stamp_today(
    stamp_today_use_case: FromDishka[StampTodayUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> StampTodayResponse:
    """Record today's stamp; calling again the same day changes nothing."""
    user_id = require_user_id(jwt_service, auth_token, "collect stamps")
    return await stamp_today_use_case.execute(user_id)


@router.get("/my-stamps", response_model=MyStampsResponse)
async def get_my_stamps(
    get_my_stamps_use_case: FromDishka[GetMyStampsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Depends(get_auth_token),
) -> MyStampsResponse:
    """The requester's stamps, newest day first, with the current streak."""
    user_id = require_user_id(jwt_service, auth_token, "read your stamps")
    return await get_my_stamps_use_case.execute(user_id)
