"""initial schema

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )
    op.create_table('inbox_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), nullable=False, index=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tag', sa.String(32), nullable=False, index=True),
        sa.Column('is_processed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )
    op.create_table('daily_reviews',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), nullable=False, index=True),
        sa.Column('review_date', sa.String(10), nullable=False),
        sa.Column('type', sa.String(2), nullable=False),
        sa.Column('todays_one_thing', sa.Text(), nullable=True),
        sa.Column('top_three_tasks', sa.Text(), nullable=True),
        sa.Column('gratitude', sa.Text(), nullable=True),
        sa.Column('accomplished', sa.Text(), nullable=True),
        sa.Column('distractions', sa.Text(), nullable=True),
        sa.Column('tomorrows_shift', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )
    op.create_index('ix_daily_reviews_user_date', 'daily_reviews', ['user_id', 'review_date'])
    op.create_table('weekly_tasks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), nullable=False, index=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('column', sa.String(32), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('week_start_date', sa.String(10), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )
    op.create_index('ix_weekly_tasks_partition', 'weekly_tasks', ['user_id', 'column', 'week_start_date'])
    op.create_table('automation_tasks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(255), nullable=False, index=True),
        sa.Column('task_name', sa.Text(), nullable=False),
        sa.Column('workflow_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(32), nullable=False, server_default='To Automate', index=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False)
    )


def downgrade():
    op.drop_table('automation_tasks')
    op.drop_index('ix_weekly_tasks_partition', table_name='weekly_tasks')
    op.drop_table('weekly_tasks')
    op.drop_index('ix_daily_reviews_user_date', table_name='daily_reviews')
    op.drop_table('daily_reviews')
    op.drop_table('inbox_items')
    op.drop_table('users')
