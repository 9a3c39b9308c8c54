"""Initial content schema

Revision ID: 3f2a9c7d1b40
Revises:
Create Date: 2025-09-20 18:02:11.412907

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c7d1b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _reorderable_columns():
    return [
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _updated_at():
    return sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('user_name', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('company', sa.String(), nullable=True),
        sa.Column('config_step', sa.Text(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        _updated_at(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'site_config',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('site_name', sa.Text(), nullable=False, server_default='Cuerpo de Banderas'),
        sa.Column('site_subtitle', sa.Text(), nullable=False, server_default='Liceo de Costa Rica'),
        sa.Column('hero_description', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('logo_s3_key', sa.Text(), nullable=True),
        sa.Column('favicon_url', sa.Text(), nullable=True),
        sa.Column('favicon_s3_key', sa.Text(), nullable=True),
        sa.Column('contact_email', sa.Text(), nullable=True),
        sa.Column('contact_phone', sa.Text(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('training_schedule', sa.Text(), nullable=True),
        sa.Column('training_location', sa.Text(), nullable=True),
        sa.Column('ceremonies_schedule', sa.Text(), nullable=True),
        sa.Column('ceremonies_notes', sa.Text(), nullable=True),
        sa.Column('meetings_schedule', sa.Text(), nullable=True),
        sa.Column('meetings_location', sa.Text(), nullable=True),
        sa.Column('admission_requirements', sa.JSON(), nullable=True),
        sa.Column('footer_description', sa.Text(), nullable=True),
        sa.Column('mission_statement', sa.Text(), nullable=True),
        sa.Column('leadership_title', sa.Text(), nullable=True),
        sa.Column('leadership_description', sa.Text(), nullable=True),
        sa.Column('leadership_image_url', sa.Text(), nullable=True),
        sa.Column('leadership_image_s3_key', sa.Text(), nullable=True),
        sa.Column('founding_year', sa.Integer(), nullable=False, server_default='1951'),
        _updated_at(),
    )

    op.create_table(
        'shield_values',
        *_reorderable_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon_name', sa.Text(), nullable=False, server_default='Award'),
        _updated_at(),
    )

    op.create_table(
        'historical_milestones',
        *_reorderable_columns(),
        sa.Column('year', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('icon_name', sa.Text(), nullable=False, server_default='Flag'),
        _updated_at(),
    )

    op.create_table(
        'leadership_periods',
        *_reorderable_columns(),
        sa.Column('year', sa.Text(), nullable=False),
        sa.Column('jefatura', sa.Text(), nullable=False),
        sa.Column('segunda_voz', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('image_s3_key', sa.Text(), nullable=True),
        _updated_at(),
    )

    op.create_table(
        'shields',
        *_reorderable_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('image_s3_key', sa.Text(), nullable=True),
        sa.Column('symbolism', sa.Text(), nullable=True),
        sa.Column('is_main_shield', sa.Boolean(), nullable=False, server_default=sa.false()),
        _updated_at(),
    )

    op.create_table(
        'historical_images',
        *_reorderable_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('image_s3_key', sa.Text(), nullable=True),
        _updated_at(),
    )

    op.create_table(
        'gallery_categories',
        *_reorderable_columns(),
        sa.Column('name', sa.Text(), nullable=False, unique=True),
        sa.Column('slug', sa.Text(), nullable=False, unique=True),
    )

    op.create_table(
        'gallery_items',
        *_reorderable_columns(),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('image_s3_key', sa.Text(), nullable=True),
        sa.Column('thumbnail_url', sa.Text(), nullable=True),
        sa.Column('thumbnail_s3_key', sa.Text(), nullable=True),
        sa.Column(
            'category_id',
            sa.String(length=36),
            sa.ForeignKey('gallery_categories.id', ondelete='CASCADE'),
            nullable=True,
        ),
        sa.Column('year', sa.Text(), nullable=True),
        _updated_at(),
    )
    op.create_index('idx_gallery_items_category_id', 'gallery_items', ['category_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_gallery_items_category_id', table_name='gallery_items')
    op.drop_table('gallery_items')
    op.drop_table('gallery_categories')
    op.drop_table('historical_images')
    op.drop_table('shields')
    op.drop_table('leadership_periods')
    op.drop_table('historical_milestones')
    op.drop_table('shield_values')
    op.drop_table('site_config')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
