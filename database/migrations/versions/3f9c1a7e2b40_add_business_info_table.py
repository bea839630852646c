"""add business_info table

Revision ID: 3f9c1a7e2b40
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f9c1a7e2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'business_info',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('business_name', sa.String(), nullable=False),
        sa.Column('business_number', sa.String(), nullable=True),
        sa.Column('business_type', sa.String(), nullable=True),
        sa.Column('business_ceo', sa.String(), nullable=True),
        sa.Column('business_item', sa.String(), nullable=True),
        sa.Column('corporate_registration_number', sa.String(), nullable=True),
        sa.Column('business_tel', sa.String(), nullable=True),
        sa.Column('business_mobile', sa.String(), nullable=True),
        sa.Column('business_ceo_email', sa.String(), nullable=True),
        sa.Column('business_fax', sa.String(), nullable=True),
        sa.Column('business_zipcode', sa.String(), nullable=True),
        sa.Column('business_address', sa.String(), nullable=True),
        sa.Column('business_address_detail', sa.String(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_business_info_business_name', 'business_info', ['business_name'])
    op.create_index('idx_business_info_created_at', 'business_info', ['created_at'])


def downgrade() -> None:
    op.drop_index('idx_business_info_created_at', 'business_info')
    op.drop_index('idx_business_info_business_name', 'business_info')
    op.drop_table('business_info')
