"""Create vacancies and user permissions

Revision ID: 3c1f6a0b9e21
Revises:
Create Date: 2026-10-18 12:04:51.220113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f6a0b9e21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # owner/user ids are unsigned 64-bit values shifted into BIGINT, see db.models.UInt64
    op.create_table(
        'vacancies',
        sa.Column('id', sa.Uuid, primary_key=True),
        sa.Column('owner_user_id', sa.BigInteger, nullable=False),
        sa.Column('title', sa.String, nullable=False),
        sa.Column('description', sa.String, nullable=False),
        sa.Column('created', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_vacancies_id', 'vacancies', ['id'])
    op.create_index('ix_vacancies_owner_user_id', 'vacancies', ['owner_user_id'])

    op.create_table(
        'user_permissions',
        sa.Column('user_id', sa.BigInteger, primary_key=True),
        sa.Column('can_manage_vacancies', sa.Boolean, nullable=False),
    )


def downgrade() -> None:
    op.drop_table('user_permissions')
    op.drop_index('ix_vacancies_owner_user_id', table_name='vacancies')
    op.drop_index('ix_vacancies_id', table_name='vacancies')
    op.drop_table('vacancies')
