"""Daily stamp use cases."""

from .stamps import (
    GetMyStampsUseCase,
    MyStampsResponse,
    StampItem,
    StampTodayResponse,
    StampTodayUseCase,
)

__all__ = [
    "GetMyStampsUseCase",
    "MyStampsResponse",
    "StampItem",
    "StampTodayResponse",
    "StampTodayUseCase",
]
