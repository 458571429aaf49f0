"""
Relational schema migration history.

Ordered list of the schema changes that take an empty database to the
current layout, plus a small runner that records applied versions in a
``schema_migrations`` table. Each migration runs in its own transaction
and is applied at most once.

The table rename step keeps every join row. PostgreSQL renames in place;
SQLite cannot drop a primary key column, so there the join tables are
rebuilt (create, copy, drop) under their new names.

Dependencies: sqlalchemy, quest_api.configs
System role: Schema evolution for existing databases

Usage:
    python -m quest_api.boundary.db.migrations
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from quest_api.boundary.db.connection import get_async_engine

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"


@dataclass(frozen=True)
class Migration:
    """
    A single forward-only schema change.

    Attributes:
        version: Sortable version string (timestamp prefix)
        description: Short human-readable summary
        statements: Builds the SQL statements for a dialect name
    """

    version: str
    description: str
    statements: Callable[[str], list[str]]


def _init(dialect: str) -> list[str]:
    return [
        """
        CREATE TABLE quests (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT,
            price INTEGER,
            difficulty TEXT,
            num_participate INTEGER,
            num_clear INTEGER
        )
        """,
    ]


def _users_challenges_progress(dialect: str) -> list[str]:
    serial_pk = (
        "INTEGER PRIMARY KEY AUTOINCREMENT" if dialect == "sqlite" else "SERIAL PRIMARY KEY"
    )
    return [
        """
        CREATE TABLE users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL
        )
        """,
        """
        CREATE TABLE challenges (
            id TEXT NOT NULL,
            quest_id TEXT NOT NULL REFERENCES quests (id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            description TEXT,
            latitude DOUBLE PRECISION,
            longitude DOUBLE PRECISION,
            stamp_name TEXT,
            stamp_image_color TEXT,
            stamp_image_gray TEXT,
            flavor_text TEXT,
            PRIMARY KEY (quest_id, id)
        )
        """,
        "CREATE INDEX ix_challenges_quest_id ON challenges (quest_id)",
        f"""
        CREATE TABLE user_quests (
            id {serial_pk},
            user_id TEXT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            quest_id TEXT NOT NULL REFERENCES quests (id) ON DELETE CASCADE
        )
        """,
        f"""
        CREATE TABLE user_challenges (
            id {serial_pk},
            user_id TEXT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            challenge_id TEXT NOT NULL
        )
        """,
    ]


def _table_rename(dialect: str) -> list[str]:
    if dialect != "sqlite":
        return [
            "ALTER TABLE user_quests RENAME TO user_participating_quests",
            "ALTER TABLE user_participating_quests DROP COLUMN id",
            "ALTER TABLE user_participating_quests "
            "ADD CONSTRAINT unique_user_quest_pair UNIQUE (user_id, quest_id)",
            "ALTER TABLE user_challenges RENAME TO user_completed_challenges",
            "ALTER TABLE user_completed_challenges DROP COLUMN id",
            "ALTER TABLE user_completed_challenges "
            "ADD CONSTRAINT unique_user_challenge_pair UNIQUE (user_id, challenge_id)",
        ]

    return [
        """
        CREATE TABLE user_participating_quests (
            user_id TEXT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            quest_id TEXT NOT NULL REFERENCES quests (id) ON DELETE CASCADE,
            CONSTRAINT unique_user_quest_pair UNIQUE (user_id, quest_id)
        )
        """,
        """
        INSERT INTO user_participating_quests (user_id, quest_id)
        SELECT user_id, quest_id FROM user_quests ORDER BY id
        """,
        "DROP TABLE user_quests",
        """
        CREATE TABLE user_completed_challenges (
            user_id TEXT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
            challenge_id TEXT NOT NULL,
            CONSTRAINT unique_user_challenge_pair UNIQUE (user_id, challenge_id)
        )
        """,
        """
        INSERT INTO user_completed_challenges (user_id, challenge_id)
        SELECT user_id, challenge_id FROM user_challenges ORDER BY id
        """,
        "DROP TABLE user_challenges",
    ]


MIGRATIONS: list[Migration] = [
    Migration("20221118162750", "init", _init),
    Migration("20221118170000", "users_challenges_progress", _users_challenges_progress),
    Migration("20230729070234", "table_rename", _table_rename),
]


async def _ensure_migrations_table(conn: AsyncConnection) -> None:
    await conn.execute(
        text(
            f"CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} ("
            "version TEXT PRIMARY KEY, "
            "description TEXT NOT NULL)"
        )
    )


async def get_applied_versions(engine: AsyncEngine) -> list[str]:
    """
    List the versions already recorded in the migrations table.

    Args:
        engine: Async engine of the target database

    Returns:
        list[str]: Applied versions in ascending order
    """
    async with engine.begin() as conn:
        await _ensure_migrations_table(conn)
        result = await conn.execute(
            text(f"SELECT version FROM {MIGRATIONS_TABLE} ORDER BY version")
        )
        return [row[0] for row in result]


async def apply_migrations(
    engine: AsyncEngine | None = None,
    target: str | None = None,
) -> list[str]:
    """
    Apply pending migrations in version order.

    Args:
        engine: Async engine of the target database (defaults to the configured engine)
        target: Last version to apply (None applies everything)

    Returns:
        list[str]: Versions applied by this call

    Raises:
        SQLAlchemyError: If a statement fails; that migration is not recorded
    """
    engine = engine or get_async_engine()
    applied = set(await get_applied_versions(engine))
    dialect = engine.dialect.name

    newly_applied: list[str] = []
    for migration in MIGRATIONS:
        if target is not None and migration.version > target:
            break
        if migration.version in applied:
            continue

        logger.info(
            "Applying migration",
            extra={"version": migration.version, "description": migration.description},
        )
        async with engine.begin() as conn:
            for statement in migration.statements(dialect):
                await conn.execute(text(statement))
            await conn.execute(
                text(
                    f"INSERT INTO {MIGRATIONS_TABLE} (version, description) "
                    "VALUES (:version, :description)"
                ),
                {"version": migration.version, "description": migration.description},
            )
        newly_applied.append(migration.version)

    logger.info("Migrations up to date", extra={"applied": newly_applied})
    return newly_applied


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(apply_migrations())
