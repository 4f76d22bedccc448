import asyncio

import asyncpg

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# Global connection pools per event loop
asyncpg_pools: dict[int, asyncpg.Pool] = {}


async def get_asyncpg_pool() -> asyncpg.Pool:
    current_loop = asyncio.get_running_loop()
    loop_id = id(current_loop)

    # Fast path: pool already exists for this loop
    if loop_id in asyncpg_pools:
        return asyncpg_pools[loop_id]

    # Slow path: create new pool (should only happen at startup)
    pool = await asyncpg.create_pool(
        settings.DATABASE_DSN,
        min_size=settings.ASYNCPG_POOL_MIN_SIZE,
        max_size=settings.ASYNCPG_POOL_MAX_SIZE,
        command_timeout=settings.ASYNCPG_POOL_COMMAND_TIMEOUT,
    )
    asyncpg_pools[loop_id] = pool
    Logger.base.info(
        f'🏊 [Pool] Created asyncpg pool for loop {loop_id} '
        f'(min={settings.ASYNCPG_POOL_MIN_SIZE}, max={settings.ASYNCPG_POOL_MAX_SIZE})'
    )

    return pool


async def close_asyncpg_pool() -> None:
    """Close the asyncpg connection pool for the current event loop."""
    loop_id = id(asyncio.get_running_loop())

    if loop_id in asyncpg_pools:
        pool = asyncpg_pools.pop(loop_id)
        await pool.close()


async def close_all_asyncpg_pools() -> None:
    """
    Close all asyncpg connection pools across all event loops

    Warning: Only call this during application shutdown.
    """
    for loop_id, pool in list(asyncpg_pools.items()):
        try:
            await pool.close()
        except Exception as e:
            Logger.base.warning(f'⚠️  [Pool] Failed to close pool for loop {loop_id}: {e}')
    asyncpg_pools.clear()
