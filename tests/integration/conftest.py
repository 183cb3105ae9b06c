"""Fixtures for API integration tests."""

from __future__ import annotations

import io
from collections.abc import AsyncGenerator
from dataclasses import replace

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from payrun.api.app import create_app
from payrun.api.dependencies import get_app_settings
from payrun.config import Settings
from payrun.providers.console_stub import ConsoleDeliveryProvider

TEST_SETTINGS = Settings(
    database_url="sqlite:///:memory:",
    data_source="fixtures",
    fail_fast=False,
    disposition_seed=7,
    log_level="WARNING",
    engine_version="1.0.0",
    host="127.0.0.1",
    port=8000,
    debug=False,
)


@pytest.fixture
def api_provider() -> ConsoleDeliveryProvider:
    return ConsoleDeliveryProvider(stream=io.StringIO())


@pytest.fixture
def app_settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def app(api_provider, app_settings) -> FastAPI:
    application = create_app(delivery_provider=api_provider)
    application.dependency_overrides[get_app_settings] = lambda: app_settings
    return application


@pytest.fixture
def fail_fast_settings() -> Settings:
    return replace(TEST_SETTINGS, fail_fast=True)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
