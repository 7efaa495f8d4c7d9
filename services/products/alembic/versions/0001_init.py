from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('stock_quantity', sa.Integer, nullable=True),
    )
    op.create_index('ix_products_category', 'products', ['category'])

def downgrade():
    op.drop_index('ix_products_category', table_name='products')
    op.drop_table('products')
