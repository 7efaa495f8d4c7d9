from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('product_code', sa.String(100), nullable=False),
        sa.Column('quantity', sa.Integer, nullable=False),
        sa.Column('warehouse_location', sa.String(200), nullable=True),
        sa.Column('product_id', sa.BigInteger, nullable=False),
        sa.CheckConstraint('quantity >= 0', name='ck_inventory_items_quantity_non_negative'),
    )
    op.create_index('ix_inventory_items_product_code', 'inventory_items', ['product_code'])
    op.create_index('ix_inventory_items_product_id', 'inventory_items', ['product_id'])

def downgrade():
    op.drop_index('ix_inventory_items_product_id', table_name='inventory_items')
    op.drop_index('ix_inventory_items_product_code', table_name='inventory_items')
    op.drop_table('inventory_items')
