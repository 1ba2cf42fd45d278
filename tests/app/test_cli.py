from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from mudworld.domain.errors import PlaceNotFoundError
from mudworld.domain.model import Direction, PlaceClass
from mudworld.domain.reconciliation import OutcomeStatus, PlaceRequest
from mudworld.domain.views import PlaceView
from mudworld.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


def _view(code: int = 1) -> PlaceView:
    return PlaceView(code=code, name=None, class_code="forest")


def test_place_create_parses_direction(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_create(place_class_code: str, direction: Direction, target: int) -> PlaceView:
        captured.update(place_class=place_class_code, direction=direction, target=target)
        return _view(3)

    monkeypatch.setattr(cli, "create_place", fake_create)

    cli.main(["place", "create", "--class", "hut", "--direction", "North", "--target", "1"])

    assert captured == {"place_class": "hut", "direction": Direction.NORTH, "target": 1}


def test_place_create_rejects_unknown_direction(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "create_place", lambda *_: _view())

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["place", "create", "--class", "hut", "--direction", "sideways", "--target", "1"])

    assert excinfo.value.code == 2


def test_place_update_reads_request_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    request_file = tmp_path / "request.json"
    request_file.write_text(
        json.dumps(
            {"classCode": "forest", "attrs": {"HP": 9}, "exits": {"up": {"targetPlaceCode": 4}}}
        )
    )
    captured: dict[str, object] = {}

    def fake_update(place_id: int, request: PlaceRequest) -> PlaceView:
        captured.update(place_id=place_id, request=request)
        return _view(place_id)

    monkeypatch.setattr(cli, "update_place", fake_update)

    cli.main(["place", "update", "7", str(request_file)])

    assert captured["place_id"] == 7
    request = captured["request"]
    assert isinstance(request, PlaceRequest)
    assert request.attrs == {"HP": 9}
    assert request.exits is not None
    assert Direction.UP in request.exits


def test_place_destroy(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def fake_destroy(place_id: int) -> OutcomeStatus:
        calls.append(place_id)
        return OutcomeStatus.DELETED

    monkeypatch.setattr(cli, "destroy_place", fake_destroy)

    cli.main(["place", "destroy", "4"])

    assert calls == [4]


def test_failures_exit_with_code_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_get(place_id: int) -> PlaceView:
        raise PlaceNotFoundError(place_id)

    monkeypatch.setattr(cli, "get_place", fake_get)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["place", "show", "404"])

    assert excinfo.value.code == 1


def test_classes_load(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    catalogue = tmp_path / "classes.json"
    catalogue.write_text(json.dumps({"placeClasses": [{"code": "hut", "name": "Hut"}]}))
    loaded: list[str] = []

    def fake_load(place_classes: list[PlaceClass]) -> int:
        loaded.extend(place_class.code for place_class in place_classes)
        return len(loaded)

    monkeypatch.setattr(cli, "load_place_classes", fake_load)

    cli.main(["classes", "load", str(catalogue)])

    assert loaded == ["hut"]


def test_missing_subcommand_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["place"])

    assert excinfo.value.code == 2
