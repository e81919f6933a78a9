"""
Schema migrations

Fresh databases are created from the SQLAlchemy models with create_schema().
Databases created before a migration existed are brought up to date by
running that migration (scripts/migrations/run_*.py).
"""
import logging

from storefront.migrations import add_order_id_to_orders_products

logger = logging.getLogger(__name__)

MIGRATIONS = {
    add_order_id_to_orders_products.VERSION: add_order_id_to_orders_products,
}


def create_schema(engine=None) -> None:
    """Create every table defined in storefront.models (final schema)"""
    from storefront.core.database import Base, engine as default_engine
    import storefront.models  # noqa: F401  registers the tables on Base

    Base.metadata.create_all(bind=engine or default_engine)


def run_migration(conn, migration, down: bool = False, dry_run: bool = False) -> bool:
    """
    Apply (or revert) one migration inside a transaction

    Skips the migration when the schema is already in the target state.

    Args:
        conn: psycopg2 connection
        migration: Migration module (upgrade, downgrade, column_exists)
        down: Revert instead of apply
        dry_run: Only report what would be done

    Returns:
        True if the migration ran (or would run in dry-run mode)
    """
    cursor = conn.cursor()

    try:
        applied = migration.column_exists(cursor)

        if applied != down:
            state = "not applied" if down else "already applied"
            logger.info(f"Migration {migration.VERSION} {migration.NAME} {state}, skipping")
            return False

        action = "downgrade" if down else "upgrade"
        if dry_run:
            logger.info(f"[DRY RUN] Would {action} {migration.VERSION} {migration.NAME}")
            return True

        if down:
            migration.downgrade(cursor)
        else:
            migration.upgrade(cursor)

        conn.commit()
        logger.info(f"Migration {migration.VERSION} {migration.NAME} {action} complete")
        return True

    except Exception:
        conn.rollback()
        logger.error(f"Migration {migration.VERSION} {migration.NAME} failed, rolled back")
        raise

    finally:
        cursor.close()
