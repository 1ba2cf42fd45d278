from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect

from mudworld.adapters.sqlalchemy import mapper_registry
from mudworld.adapters.sqlalchemy.migrations import upgrade_head

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def test_migrations_create_mapped_tables(sqlite_engine: Engine) -> None:
    table_names = set(inspect(sqlite_engine).get_table_names())

    assert set(mapper_registry.metadata.tables) <= table_names
    assert "alembic_version" in table_names


def test_upgrade_is_repeatable(sqlite_engine: Engine) -> None:
    upgrade_head(engine=sqlite_engine)

    columns = {c["name"] for c in inspect(sqlite_engine).get_columns("place_exit")}
    assert columns == {"place_code", "direction", "target_place_code", "visible", "opened", "locked"}
