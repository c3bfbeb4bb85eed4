"""baseline_migration

Revision ID: 3c1f0a9d2b7e
Revises: 
Create Date: 2026-10-18 10:12:41.508217

Creates the tenant, page, job, user and comment tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    """
    Only creates tables that don't exist yet, so databases created by
    init_db() can be stamped forward safely.
    """
    if not table_exists('companies'):
        op.create_table('companies',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('slug', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('is_published', sa.Boolean(), nullable=False),
            sa.Column('last_saved_at', sa.DateTime(timezone=True), nullable=True),
            sa.Column('last_published_at', sa.DateTime(timezone=True), nullable=True),
            sa.Column('published_snapshot', sa.JSON(), nullable=True),
            sa.Column('draft_version', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_companies_id'), 'companies', ['id'], unique=False)
        op.create_index(op.f('ix_companies_slug'), 'companies', ['slug'], unique=True)

    if not table_exists('company_themes'):
        op.create_table('company_themes',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('primary_color', sa.String(), nullable=False),
            sa.Column('secondary_color', sa.String(), nullable=False),
            sa.Column('background_color', sa.String(), nullable=False),
            sa.Column('logo_url', sa.Text(), nullable=True),
            sa.Column('banner_url', sa.Text(), nullable=True),
            sa.Column('banner_urls', sa.JSON(), nullable=True),
            sa.Column('auto_rotate', sa.Boolean(), nullable=False),
            sa.Column('rotation_interval', sa.Integer(), nullable=False),
            sa.Column('video_url', sa.Text(), nullable=True),
            sa.Column('header_links', sa.JSON(), nullable=True),
            sa.Column('footer_text', sa.Text(), nullable=True),
            sa.Column('footer_links', sa.JSON(), nullable=True),
            sa.Column('font_family', sa.String(), nullable=False),
            sa.Column('font_size', sa.String(), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_company_themes_id'), 'company_themes', ['id'], unique=False)
        op.create_index(op.f('ix_company_themes_company_id'), 'company_themes', ['company_id'], unique=True)

    if not table_exists('page_sections'):
        op.create_table('page_sections',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('type', sa.String(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('layout', sa.String(), nullable=False),
            sa.Column('is_visible', sa.Boolean(), nullable=False),
            sa.Column('order', sa.Integer(), nullable=False),
            sa.Column('column_group', sa.Integer(), nullable=False),
            sa.Column('column_index', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_section_company_order', 'page_sections', ['company_id', 'order'], unique=False)
        op.create_index(op.f('ix_page_sections_id'), 'page_sections', ['id'], unique=False)
        op.create_index(op.f('ix_page_sections_company_id'), 'page_sections', ['company_id'], unique=False)

    if not table_exists('jobs'):
        op.create_table('jobs',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(), nullable=False),
            sa.Column('department', sa.String(), nullable=False),
            sa.Column('location', sa.String(), nullable=False),
            sa.Column('location_type', sa.String(), nullable=False),
            sa.Column('job_type', sa.String(), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('requirements', sa.Text(), nullable=False),
            sa.Column('salary', sa.String(), nullable=True),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('posted_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_job_company_posted', 'jobs', ['company_id', 'posted_at'], unique=False)
        op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
        op.create_index(op.f('ix_jobs_company_id'), 'jobs', ['company_id'], unique=False)
        op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'], unique=False)
        op.create_index(op.f('ix_jobs_is_active'), 'jobs', ['is_active'], unique=False)

    if not table_exists('users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(), nullable=False),
            sa.Column('password_hash', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=True),
            sa.Column('role', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_company_id'), 'users', ['company_id'], unique=False)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    if not table_exists('section_comments'):
        op.create_table('section_comments',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('company_id', sa.Integer(), nullable=False),
            sa.Column('section_key', sa.String(), nullable=False),
            sa.Column('user_email', sa.String(), nullable=False),
            sa.Column('user_name', sa.String(), nullable=True),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('mentions', sa.JSON(), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_comment_company_section', 'section_comments', ['company_id', 'section_key'], unique=False)
        op.create_index(op.f('ix_section_comments_id'), 'section_comments', ['id'], unique=False)
        op.create_index(op.f('ix_section_comments_company_id'), 'section_comments', ['company_id'], unique=False)
        op.create_index(op.f('ix_section_comments_section_key'), 'section_comments', ['section_key'], unique=False)
        op.create_index(op.f('ix_section_comments_created_at'), 'section_comments', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('section_comments')
    op.drop_table('users')
    op.drop_table('jobs')
    op.drop_table('page_sections')
    op.drop_table('company_themes')
    op.drop_table('companies')
