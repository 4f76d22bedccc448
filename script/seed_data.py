#!/usr/bin/env python3
"""
Database Seed Script
Populate initial data into the database

Features:
1. Create Users - one account per role
2. Create Places - bookable workplaces
3. Create Shop Items - initial catalogue
"""

import asyncio
from dataclasses import dataclass

from src.platform.database.asyncpg_setting import close_all_asyncpg_pools, get_asyncpg_pool
from src.service.portal.domain.entity.shop_item_entity import ShopItem
from src.service.portal.domain.entity.user_entity import UserEntity, UserRole
from src.service.portal.driven_adapter.repo.shop_item_command_repo_impl import (
    ShopItemCommandRepoImpl,
)
from src.service.portal.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.portal.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)

DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class UserConfig:
    """User seed configuration"""
    login: str
    username: str
    role: UserRole


TEST_USERS = [
    UserConfig(login='user', username='Regular User', role=UserRole.USER),
    UserConfig(login='editor', username='Shop Editor', role=UserRole.SHOP_EDITOR),
    UserConfig(login='admin', username='Super Admin', role=UserRole.SUPER_ADMIN),
]

# (name, phone, internet, second_screen)
PLACES = [
    ('Desk 1', '101', 'ethernet', 'yes'),
    ('Desk 2', '102', 'wifi', 'no'),
    ('Desk 3', '', 'wifi', 'yes'),
    ('Meeting Room A', '201', 'ethernet', 'yes'),
]

SHOP_ITEMS = [
    ShopItem(name='Coffee mug', price=150, description='Company logo mug'),
    ShopItem(name='Hoodie', price=900, description='Grey, all sizes'),
    ShopItem(name='Sticker pack', price=30),
]


async def create_users() -> None:
    print(f'👥 Creating {len(TEST_USERS)} users...')

    user_repo = UserCommandRepoImpl()
    password_hasher = BcryptPasswordHasher()

    for config in TEST_USERS:
        user = UserEntity(login=config.login, username=config.username, role=config.role)
        user.set_password(DEFAULT_PASSWORD, password_hasher)
        created_user = await user_repo.create(user=user)
        print(f'   ✅ Created {config.role.name.lower()}: ID={created_user.user_id}, Login={user.login}')


async def create_places() -> None:
    print(f'🪑 Creating {len(PLACES)} places...')

    async with (await get_asyncpg_pool()).acquire() as conn:
        await conn.executemany(
            'INSERT INTO place (name, phone, internet, second_screen) VALUES ($1, $2, $3, $4)',
            PLACES,
        )
    print('   ✅ Places created')


async def create_shop_items() -> None:
    print(f'🛒 Creating {len(SHOP_ITEMS)} shop items...')

    item_repo = ShopItemCommandRepoImpl()
    for item in SHOP_ITEMS:
        created = await item_repo.insert(item=item)
        print(f'   ✅ Created item: ID={created.item_id}, Name={created.name}')


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')

    async with (await get_asyncpg_pool()).acquire() as conn:
        for table in ['user', 'place', 'shop_item']:
            count = await conn.fetchval(f'SELECT COUNT(*) FROM "{table}"')
            print(f'   {table} count: {count}')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_users()
        await create_places()
        await create_shop_items()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Accounts:')
        for user in TEST_USERS:
            print(f'   {user.role.name}: {user.login} / {DEFAULT_PASSWORD}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1) from e

    finally:
        await close_all_asyncpg_pools()


def run() -> None:
    asyncio.run(main())


if __name__ == '__main__':
    run()
