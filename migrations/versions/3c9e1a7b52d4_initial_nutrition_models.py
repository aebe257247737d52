"""initial nutrition models

Revision ID: 3c9e1a7b52d4
Revises: 
Create Date: 2026-10-18 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9e1a7b52d4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
            sa.Column('image', sa.String(length=500), nullable=False, server_default=''),
            sa.Column('age', sa.Integer(), nullable=True),
            sa.Column('weight', sa.Float(), nullable=True),
            sa.Column('height', sa.Float(), nullable=True),
            sa.Column('gender', sa.String(length=10), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if not insp.has_table('foods'):
        op.create_table(
            'foods',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=255), nullable=False, unique=True),
            sa.Column('calories', sa.Float(), nullable=False),
            sa.Column('protein', sa.Float(), nullable=False, server_default='0'),
            sa.Column('carbs', sa.Float(), nullable=True),
            sa.Column('fat', sa.Float(), nullable=True),
            sa.Column('fiber', sa.Float(), nullable=True),
            sa.Column('sugar', sa.Float(), nullable=True),
            sa.Column('sodium', sa.Float(), nullable=True),
        )

    if not insp.has_table('user_diets'):
        op.create_table(
            'user_diets',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
            sa.Column('food_id', sa.Integer(), sa.ForeignKey('foods.id'), nullable=False),
            sa.Column('quantity', sa.Float(), nullable=False),
            sa.Column('meal_type', sa.String(length=20), nullable=False),
            sa.Column('consumed_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_user_diets_user_id', 'user_diets', ['user_id'])
        op.create_index('ix_user_diets_consumed_at', 'user_diets', ['consumed_at'])


def downgrade():
    # Drop in reverse dependency order
    op.drop_index('ix_user_diets_consumed_at', table_name='user_diets')
    op.drop_index('ix_user_diets_user_id', table_name='user_diets')
    op.drop_table('user_diets')
    op.drop_table('foods')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
