"""create_users_table

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-17 09:12:31.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=150), nullable=False),
        sa.Column(
            'membership_type',
            sa.Enum('BASIC', 'PREMIUM', 'STUDENT', name='membershiptype', length=50),
            nullable=True,
        ),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('registration_date', sa.Date(), nullable=True),
        sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        sa.Column('address', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

    # Drop the enum type (PostgreSQL)
    sa.Enum(name='membershiptype').drop(op.get_bind(), checkfirst=True)
