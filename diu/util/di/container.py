"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from diu.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: Postgres persistence, env settings.

    Returns:
        Container holding every provider plus the FastAPI request context
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
