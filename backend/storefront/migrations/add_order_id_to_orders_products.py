"""
Migration 1598665491467: add orders_products.order_id

Adds a nullable uuid column orders_products.order_id referencing orders.id.
Deleting an order sets the column to NULL on its line items.

Reverse: drop the foreign key, then the column.
"""
import logging

logger = logging.getLogger(__name__)

VERSION = "1598665491467"
NAME = "AddOrderIdToOrdersProducts"

TABLE = "orders_products"
COLUMN = "order_id"
FOREIGN_KEY = "fk_ordersproducts_order"


def column_exists(cursor) -> bool:
    cursor.execute("""
        SELECT EXISTS (
            SELECT FROM information_schema.columns
            WHERE table_schema = 'public'
            AND table_name = %s
            AND column_name = %s
        )
    """, (TABLE, COLUMN))
    return bool(cursor.fetchone()[0])


def upgrade(cursor) -> None:
    logger.info(f"Adding column {TABLE}.{COLUMN}")
    cursor.execute(f"ALTER TABLE {TABLE} ADD COLUMN {COLUMN} uuid NULL")

    logger.info(f"Creating foreign key {FOREIGN_KEY}")
    cursor.execute(f"""
        ALTER TABLE {TABLE}
        ADD CONSTRAINT {FOREIGN_KEY}
        FOREIGN KEY ({COLUMN}) REFERENCES orders (id)
        ON DELETE SET NULL
    """)


def downgrade(cursor) -> None:
    logger.info(f"Dropping foreign key {FOREIGN_KEY}")
    cursor.execute(f"ALTER TABLE {TABLE} DROP CONSTRAINT {FOREIGN_KEY}")

    logger.info(f"Dropping column {TABLE}.{COLUMN}")
    cursor.execute(f"ALTER TABLE {TABLE} DROP COLUMN {COLUMN}")
