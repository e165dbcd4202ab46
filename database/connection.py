"""
Database connection management.
Handles per-request connections, initialization, and teardown.
"""

import os
import sqlite3
from datetime import datetime
from flask import g, current_app

from utils.helpers import fold_case


def _adapt_datetime(value: datetime) -> str:
    return value.isoformat(' ')


def _convert_timestamp(value: bytes) -> datetime:
    return datetime.fromisoformat(value.decode())


# Explicit timestamp round-tripping (sqlite3's default adapters are deprecated)
sqlite3.register_adapter(datetime, _adapt_datetime)
sqlite3.register_converter('TIMESTAMP', _convert_timestamp)


def get_db():
    """
    Get the request's database connection with row factory.

    Returns:
        sqlite3.Connection: Database connection object
    """
    if 'db' not in g:
        db_path = current_app.config.get('DATABASE_PATH', 'instance/lunchly.db')
        db_dir = os.path.dirname(db_path)
        if db_dir and not os.path.exists(db_dir):
            os.makedirs(db_dir, exist_ok=True)

        g.db = sqlite3.connect(
            db_path,
            detect_types=sqlite3.PARSE_DECLTYPES
        )
        g.db.row_factory = sqlite3.Row
        # SQLite's LOWER() only folds ASCII
        g.db.create_function('FOLD_CASE', 1, fold_case, deterministic=True)
        # Enable foreign key constraints
        g.db.execute('PRAGMA foreign_keys = ON')
    return g.db


def close_db(e=None):
    """
    Close database connection.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db(seed: bool = False):
    """
    Initialize database: drop existing tables, create new schema.
    WARNING: This will delete all existing data!

    Args:
        seed: Also insert sample customers and reservations
    """
    from database.schema import drop_tables, create_tables, create_indexes
    from database.seed import seed_database

    db = get_db()

    drop_tables(db)
    create_tables(db)
    create_indexes(db)

    if seed:
        seed_database(db)

    db.commit()
    current_app.logger.info('Database initialized at %s', current_app.config.get('DATABASE_PATH'))
