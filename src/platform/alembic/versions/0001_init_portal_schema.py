"""init_portal_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- user: portal accounts with an integer role (1 user, 2 shop editor, 3 super admin)
- place: bookable workplaces
- reservation: bookings of one place by one user over [start, finish)
- shop_item: shop catalogue
- place_and_reservation: view joining every place with its reservations

Note: no exclusion constraint on reservation periods; overlap is checked before insert.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'user',
        sa.Column('user_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('login', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Integer(), server_default=sa.text('1'), nullable=False),
        sa.PrimaryKeyConstraint('user_id'),
    )
    op.create_index(op.f('ix_user_login'), 'user', ['login'], unique=True)

    op.create_table(
        'place',
        sa.Column('place_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=True),
        sa.Column('internet', sa.String(length=64), nullable=True),
        sa.Column('second_screen', sa.String(length=64), nullable=True),
        sa.PrimaryKeyConstraint('place_id'),
    )

    op.create_table(
        'reservation',
        sa.Column('reservation_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('start', sa.DateTime(timezone=False), nullable=False),
        sa.Column('finish', sa.DateTime(timezone=False), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['place_id'], ['place.place_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['user.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('reservation_id'),
    )
    op.create_index('idx_reservation_place_id', 'reservation', ['place_id'])
    op.create_index('idx_reservation_user_id_start', 'reservation', ['user_id', 'start'])

    op.create_table(
        'shop_item',
        sa.Column('item_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('item_id'),
    )

    op.execute(
        """
        CREATE VIEW place_and_reservation AS
        SELECT p.place_id, p.name, p.phone, p.internet, p.second_screen,
               r.reservation_id, r.user_id, r.start, r.finish
        FROM place p
        LEFT JOIN reservation r ON r.place_id = p.place_id
        """
    )


def downgrade() -> None:
    op.execute('DROP VIEW IF EXISTS place_and_reservation')
    op.drop_table('shop_item')
    op.drop_index('idx_reservation_user_id_start', table_name='reservation')
    op.drop_index('idx_reservation_place_id', table_name='reservation')
    op.drop_table('reservation')
    op.drop_table('place')
    op.drop_index(op.f('ix_user_login'), table_name='user')
    op.drop_table('user')
