"""Create canvas table with its singleton row

Revision ID: 001_create_canvas
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_canvas'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """
    Creates the canvas table and inserts the singleton row (id=1).

    The application also creates the table on startup when it is missing,
    so this revision is a no-op on databases the app has already touched.
    """
    bind = op.get_bind()
    if sa.inspect(bind).has_table('canvas'):
        return

    canvas = op.create_table(
        'canvas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.Text(), nullable=True, server_default='Topping Courier'),
        sa.Column('customer_segments', sa.Text(), nullable=True, server_default=''),
        sa.Column('value_propositions', sa.Text(), nullable=True, server_default=''),
        sa.Column('channels', sa.Text(), nullable=True, server_default=''),
        sa.Column('customer_relationships', sa.Text(), nullable=True, server_default=''),
        sa.Column('revenue_streams', sa.Text(), nullable=True, server_default=''),
        sa.Column('key_resources', sa.Text(), nullable=True, server_default=''),
        sa.Column('key_activities', sa.Text(), nullable=True, server_default=''),
        sa.Column('key_partners', sa.Text(), nullable=True, server_default=''),
        sa.Column('cost_structure', sa.Text(), nullable=True, server_default=''),
        sa.Column('last_updated', sa.DateTime(), nullable=True, server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id')
    )

    op.bulk_insert(canvas, [{'id': 1, 'company_name': 'Topping Courier'}])


def downgrade():
    """
    Drops the canvas table.

    WARNING: This deletes the stored canvas.
    """
    op.drop_table('canvas')
