"""product tags table, order status enum

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19 18:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

order_status = sa.Enum("pending", "completed", name="orderstatus")


def upgrade() -> None:
    op.create_table(
        "product_tags",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(), nullable=False),
    )
    op.create_index("ix_product_tags_product_id", "product_tags", ["product_id"])
    op.create_index("ix_product_tags_name", "product_tags", ["name"])

    # переносим теги из JSON-колонки в строки product_tags
    products = sa.table("products", sa.column("id", sa.Integer), sa.column("tags", sa.JSON))
    product_tags = sa.table(
        "product_tags", sa.column("product_id", sa.Integer), sa.column("name", sa.String)
    )
    bind = op.get_bind()
    rows = []
    for product_id, tags in bind.execute(sa.select(products.c.id, products.c.tags)):
        for name in dict.fromkeys(tags or []):
            rows.append({"product_id": product_id, "name": name})
    if rows:
        op.bulk_insert(product_tags, rows)

    op.execute("UPDATE products SET images = '[]' WHERE images IS NULL")
    op.execute("UPDATE orders SET status = 'completed' WHERE status NOT IN ('pending', 'completed')")

    order_status.create(bind, checkfirst=True)
    with op.batch_alter_table("products") as batch:
        batch.drop_column("tags")
        batch.alter_column("images", existing_type=sa.JSON(), nullable=False)
    with op.batch_alter_table("orders") as batch:
        batch.alter_column(
            "status",
            existing_type=sa.String(),
            type_=order_status,
            nullable=False,
            postgresql_using="status::orderstatus",
        )


def downgrade() -> None:
    with op.batch_alter_table("orders") as batch:
        batch.alter_column("status", existing_type=order_status, type_=sa.String(), nullable=True)
    order_status.drop(op.get_bind(), checkfirst=True)

    with op.batch_alter_table("products") as batch:
        batch.add_column(sa.Column("tags", sa.JSON(), nullable=True))
        batch.alter_column("images", existing_type=sa.JSON(), nullable=True)

    products = sa.table("products", sa.column("id", sa.Integer), sa.column("tags", sa.JSON))
    bind = op.get_bind()
    tags = {}
    for product_id, name in bind.execute(
        sa.text("SELECT product_id, name FROM product_tags ORDER BY id")
    ):
        tags.setdefault(product_id, []).append(name)
    for product_id, names in tags.items():
        bind.execute(products.update().where(products.c.id == product_id).values(tags=names))

    op.drop_index("ix_product_tags_name", table_name="product_tags")
    op.drop_index("ix_product_tags_product_id", table_name="product_tags")
    op.drop_table("product_tags")
