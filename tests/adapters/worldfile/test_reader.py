from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from mudworld.adapters.worldfile import read_place_classes, read_place_request
from mudworld.domain.errors import UnknownDirectionError
from mudworld.domain.model import Direction

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, name: str, document: object) -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return path


def test_read_place_classes(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "classes.json",
        {
            "placeClasses": [
                {
                    "code": "forest",
                    "name": "Forest",
                    "attrs": {"HP": 100, "MAXHP": 100},
                    "demisedPlaceClassCode": "ruins",
                },
                {"code": "ruins", "name": "Ruins"},
            ]
        },
    )

    forest, ruins = read_place_classes(path)

    assert forest.code == "forest"
    assert forest.attributes == {"HP": 100, "MAXHP": 100}
    assert forest.demised_place_class_code == "ruins"
    assert ruins.attributes == {}
    assert ruins.demised_place_class_code is None


def test_read_place_request(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "request.json",
        {
            "classCode": "forest",
            "attrs": {"HP": 30},
            "exits": {
                "East": {"targetPlaceCode": 2, "opened": False},
                "up": {"targetPlaceCode": 3, "locked": True, "visible": False},
            },
        },
    )

    request = read_place_request(path)

    assert request.class_code == "forest"
    assert request.attrs == {"HP": 30}
    assert request.exits is not None
    east = request.exits[Direction.EAST]
    assert east.target_place_code == 2
    assert (east.visible, east.opened, east.locked) == (True, False, False)
    up = request.exits[Direction.UP]
    assert (up.visible, up.opened, up.locked) == (False, True, True)


def test_request_without_exits_leaves_them_alone(tmp_path: Path) -> None:
    path = _write(tmp_path, "request.json", {"classCode": "forest"})

    request = read_place_request(path)

    assert request.exits is None
    assert request.attrs == {}


def test_unknown_direction_is_rejected(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "request.json",
        {"classCode": "forest", "exits": {"sideways": {"targetPlaceCode": 2}}},
    )

    with pytest.raises(UnknownDirectionError):
        read_place_request(path)


def test_malformed_request_is_a_validation_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "request.json", {"attrs": {"HP": "lots"}})

    with pytest.raises(ValidationError):
        read_place_request(path)
