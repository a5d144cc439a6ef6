"""Shared base for the dishka providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have both a production and an in-memory provider
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with the metadata used to pick prod or mock implementations.

    Attributes:
        __mock_component__: Component name, set on swappable bases only
        __is_mock__: True on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
