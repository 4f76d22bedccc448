"""
Test Configuration and Fixtures

This module provides:
- Test environment variables, set before any application import
- Database creation and Alembic migration for integration tests
- Table cleanup and pool teardown around every integration test

Architecture:
- Unit tests (test/**/unit/): mocked repositories, no database
- Integration tests (test/**/integration/): real PostgreSQL, skipped when unreachable
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['POSTGRES_DB'] = 'portal_test_db'
    else:
        os.environ['POSTGRES_DB'] = f'portal_test_db_{worker_id}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'test_secret_key')
    os.environ.setdefault('ASYNCPG_POOL_MIN_SIZE', '1')
    os.environ.setdefault('ASYNCPG_POOL_MAX_SIZE', '5')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
import contextlib  # noqa: E402
from typing import Any  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
import asyncpg  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.constant.path import ALEMBIC_INI  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = str(item.fspath)
        if '/unit/' in path or '\\unit\\' in path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in path or '\\integration\\' in path:
            item.add_marker(pytest.mark.integration)
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _server_dsn(database: str) -> str:
    password = settings.POSTGRES_PASSWORD.get_secret_value()
    return (
        f'postgresql://{settings.POSTGRES_USER}:{password}'
        f'@{settings.POSTGRES_SERVER}:{settings.POSTGRES_PORT}/{database}'
    )


async def _create_test_database() -> None:
    conn = await asyncpg.connect(_server_dsn('postgres'), timeout=3)
    try:
        exists = await conn.fetchval(
            'SELECT 1 FROM pg_database WHERE datname = $1', settings.POSTGRES_DB
        )
        if not exists:
            await conn.execute(f'CREATE DATABASE "{settings.POSTGRES_DB}"')
    finally:
        await conn.close()

    conn = await asyncpg.connect(settings.DATABASE_DSN)
    try:
        await conn.execute('DROP SCHEMA public CASCADE')
        await conn.execute('CREATE SCHEMA public')
    finally:
        await conn.close()


async def _clean_all_tables() -> None:
    conn = await asyncpg.connect(settings.DATABASE_DSN)
    try:
        await conn.execute(
            'TRUNCATE reservation, shop_item, place, "user" RESTART IDENTITY CASCADE'
        )
    finally:
        await conn.close()


@pytest.fixture(scope='session')
def test_database() -> None:
    """Create and migrate the test database once; skip when PostgreSQL is unreachable."""
    try:
        asyncio.run(_create_test_database())
    except (OSError, asyncio.TimeoutError, asyncpg.PostgresError) as e:
        pytest.skip(f'PostgreSQL is not reachable: {e}')

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL_ASYNC)
    command.upgrade(alembic_cfg, 'head')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database(test_database: None) -> AsyncGenerator[None, None]:
    await _clean_all_tables()

    yield

    from src.platform.database.asyncpg_setting import close_asyncpg_pool

    with contextlib.suppress(Exception):
        await close_asyncpg_pool()


@pytest.fixture
def insert_user() -> Any:
    """Insert a user straight into the table and return its id."""
    from src.service.portal.driven_adapter.security.bcrypt_password_hasher import (
        BcryptPasswordHasher,
    )
    from pydantic import SecretStr

    hasher = BcryptPasswordHasher()

    async def _insert(login: str, password: str, username: str = 'Test User', role: int = 1) -> int:
        conn = await asyncpg.connect(settings.DATABASE_DSN)
        try:
            return await conn.fetchval(
                'INSERT INTO "user" (login, username, hashed_password, role) '
                'VALUES ($1, $2, $3, $4) RETURNING user_id',
                login,
                username,
                hasher.hash_password(plain_password=SecretStr(password)),
                int(role),
            )
        finally:
            await conn.close()

    return _insert


@pytest.fixture
def insert_place() -> Any:
    async def _insert(name: str, phone: str = '', internet: str = '', second_screen: str = '') -> int:
        conn = await asyncpg.connect(settings.DATABASE_DSN)
        try:
            return await conn.fetchval(
                'INSERT INTO place (name, phone, internet, second_screen) '
                'VALUES ($1, $2, $3, $4) RETURNING place_id',
                name,
                phone,
                internet,
                second_screen,
            )
        finally:
            await conn.close()

    return _insert


# =============================================================================
# HTTP Client
# =============================================================================
@pytest.fixture(scope='session')
def client(test_database: None) -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
