"""SQLAlchemy mapping metadata for the world domain model."""

from __future__ import annotations

import logging
from functools import cache

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from mudworld.domain.model import (
    Direction,
    Place,
    PlaceAttr,
    PlaceClass,
    PlaceClassAttr,
    PlaceExit,
)

log = logging.getLogger(__name__)

DIRECTION_LENGTH = 16

mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Reference data --------------------------------------------------------------

place_class_table = Table(
    "place_class",
    mapper_registry.metadata,
    Column("code", String(32), primary_key=True),
    Column("name", String, nullable=False),
    Column(
        "demised_place_class_code",
        String(32),
        ForeignKey("place_class.code"),
        nullable=True,
    ),
)

place_class_attr_table = Table(
    "place_class_attr",
    mapper_registry.metadata,
    Column(
        "place_class_code",
        String(32),
        ForeignKey("place_class.code", ondelete="CASCADE"),
        key="_place_class_code",
        primary_key=True,
    ),
    Column("code", String(32), primary_key=True),
    Column("value", Integer, nullable=False),
)

# Places ----------------------------------------------------------------------

place_table = Table(
    "place",
    mapper_registry.metadata,
    Column("code", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=True),
    Column(
        "place_class_code",
        String(32),
        ForeignKey("place_class.code"),
        key="_place_class_code",
        nullable=False,
    ),
)

place_attr_table = Table(
    "place_attr",
    mapper_registry.metadata,
    Column(
        "place_code",
        Integer,
        ForeignKey("place.code", ondelete="CASCADE"),
        key="_place_code",
        primary_key=True,
    ),
    Column("code", String(32), primary_key=True),
    Column("value", Integer, nullable=False),
)

place_exit_table = Table(
    "place_exit",
    mapper_registry.metadata,
    Column(
        "place_code",
        Integer,
        ForeignKey("place.code", ondelete="CASCADE"),
        key="_place_code",
        primary_key=True,
    ),
    Column(
        "direction",
        Enum(
            Direction,
            native_enum=False,
            length=DIRECTION_LENGTH,
            values_callable=lambda members: [member.value for member in members],
        ),
        primary_key=True,
    ),
    Column("target_place_code", Integer, nullable=False),
    Column("visible", Boolean, nullable=False, default=True),
    Column("opened", Boolean, nullable=False, default=True),
    Column("locked", Boolean, nullable=False, default=False),
    Index("ix_place_exit_target", "target_place_code"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        PlaceClassAttr,
        place_class_attr_table,
    )

    mapper_registry.map_imperatively(
        PlaceClass,
        place_class_table,
        properties={
            "_attrs": relationship(
                PlaceClassAttr,
                cascade="all, delete-orphan",
                order_by=place_class_attr_table.c.code,
                lazy="selectin",
            ),
        },
    )

    mapper_registry.map_imperatively(
        PlaceAttr,
        place_attr_table,
    )

    mapper_registry.map_imperatively(
        PlaceExit,
        place_exit_table,
    )

    mapper_registry.map_imperatively(
        Place,
        place_table,
        properties={
            "place_class": relationship(PlaceClass, lazy="joined"),
            "_attrs": relationship(
                PlaceAttr,
                cascade="all, delete-orphan",
                order_by=place_attr_table.c.code,
                lazy="selectin",
            ),
            "_exits": relationship(
                PlaceExit,
                cascade="all, delete-orphan",
                order_by=place_exit_table.c.direction,
                lazy="selectin",
            ),
        },
    )

    configure_mappers()
    return mapper_registry
