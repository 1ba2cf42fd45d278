from __future__ import annotations

import pytest

from mudworld.domain.errors import (
    ExitAlreadyExistsError,
    IllegalParameterError,
    PlaceClassNotFoundError,
    PlaceNotFoundError,
)
from mudworld.domain.model import Direction
from mudworld.domain.reconciliation import (
    ExitRequest,
    OutcomeStatus,
    PlaceReconciliationEngine,
    PlaceRequest,
)
from tests.helpers.world import (
    FakeWorldUnitOfWork,
    build_world,
    make_place,
    make_place_class,
)


def _engine(uow: FakeWorldUnitOfWork) -> PlaceReconciliationEngine:
    return PlaceReconciliationEngine(places=uow.places, place_classes=uow.place_classes)


def _forest_world() -> FakeWorldUnitOfWork:
    forest = make_place_class(
        "forest",
        attributes={"HP": 100, "MAXHP": 100},
        demised_place_class_code="ruins",
    )
    ruins = make_place_class("ruins", attributes={"HP": 0, "MAXHP": 0})
    meadow = make_place_class("meadow", attributes={"HP": 10, "MAXHP": 10})
    place = make_place(
        forest,
        code=1,
        attrs={"HP": 100, "MAXHP": 100},
        exits={Direction.EAST: 2},
    )
    neighbour = make_place(meadow, code=2, attrs={"HP": 10, "MAXHP": 10})
    return build_world([forest, ruins, meadow], [place, neighbour])


def test_update_syncs_attributes_and_exits() -> None:
    uow = _forest_world()
    place = uow.places.get(1)
    assert place is not None
    east = place.find_exit(Direction.EAST)

    outcome = _engine(uow).update_place(
        1,
        PlaceRequest(
            class_code="forest",
            attrs={"HP": 60, "MAXHP": 100},
            exits={Direction.EAST: ExitRequest(target_place_code=2, opened=False)},
        ),
    )

    assert outcome.status is OutcomeStatus.UPDATED
    assert outcome.place is place
    assert place.attribute_values == {"HP": 60, "MAXHP": 100}
    assert place.find_exit(Direction.EAST) is east
    assert east is not None
    assert east.opened is False
    assert uow.places.added[-1] is place


def test_update_clamps_hp_before_saving() -> None:
    uow = _forest_world()

    outcome = _engine(uow).update_place(
        1, PlaceRequest(class_code="forest", attrs={"HP": 150, "MAXHP": 100})
    )

    assert outcome.place is not None
    assert outcome.place.attribute_values == {"HP": 100, "MAXHP": 100}


def test_update_changes_class_and_syncs_class_attributes() -> None:
    uow = _forest_world()

    outcome = _engine(uow).update_place(
        1, PlaceRequest(class_code="meadow", attrs={"HP": 50, "MAXHP": 100})
    )

    assert outcome.place is not None
    assert outcome.place.place_class.code == "meadow"
    assert outcome.place.attribute_values == {"HP": 10, "MAXHP": 10}


def test_zero_hp_demises_and_skips_remaining_steps() -> None:
    uow = _forest_world()

    outcome = _engine(uow).update_place(
        1,
        PlaceRequest(
            class_code="meadow",
            attrs={"HP": 0, "MAXHP": 100},
            exits={},
        ),
    )

    assert outcome.status is OutcomeStatus.DEMISED
    assert outcome.destroyed
    place = outcome.place
    assert place is not None
    assert place.place_class.code == "ruins"
    assert place.attribute_values == {"HP": 0, "MAXHP": 0}
    # exit sync never ran
    assert place.find_exit(Direction.EAST) is not None


def test_zero_hp_without_demise_class_deletes() -> None:
    uow = _forest_world()

    outcome = _engine(uow).update_place(
        2, PlaceRequest(class_code="meadow", attrs={"HP": 0, "MAXHP": 10})
    )

    assert outcome.status is OutcomeStatus.DELETED
    assert outcome.place is None
    assert uow.places.get(2) is None
    assert [p.code for p in uow.places.removed] == [2]


def test_destroy_place_demises_when_class_has_successor() -> None:
    uow = _forest_world()

    outcome = _engine(uow).destroy_place(1)

    assert outcome.status is OutcomeStatus.DEMISED
    assert outcome.place is not None
    assert outcome.place.place_class.code == "ruins"


def test_update_unknown_place_raises() -> None:
    uow = _forest_world()

    with pytest.raises(PlaceNotFoundError) as excinfo:
        _engine(uow).update_place(404, PlaceRequest(class_code="forest"))

    assert excinfo.value.key == 404
    assert excinfo.value.message_key == "place.not.found"


def test_update_to_unknown_class_raises() -> None:
    uow = _forest_world()

    with pytest.raises(PlaceClassNotFoundError):
        _engine(uow).update_place(1, PlaceRequest(class_code="volcano", attrs={"HP": 5}))


def test_create_place_links_both_ways() -> None:
    uow = _forest_world()

    place = _engine(uow).create_place("meadow", Direction.WEST, 2)

    assert place.code == 3
    assert place.attribute_values == {"HP": 10, "MAXHP": 10}
    west = place.find_exit(Direction.WEST)
    assert west is not None
    assert west.target_place_code == 2
    target = uow.places.get(2)
    assert target is not None
    back = target.find_exit(Direction.EAST)
    assert back is not None
    assert back.target_place_code == 3


def test_create_place_rejects_taken_opposite_exit_without_saving() -> None:
    uow = _forest_world()

    with pytest.raises(ExitAlreadyExistsError) as excinfo:
        _engine(uow).create_place("meadow", Direction.WEST, 1)

    assert isinstance(excinfo.value, IllegalParameterError)
    assert excinfo.value.message_key == "place.exit.exists"
    assert uow.places.added == []
    assert [p.code for p in uow.places.list_all()] == [1, 2]


def test_create_place_with_unknown_class_raises() -> None:
    uow = _forest_world()

    with pytest.raises(PlaceClassNotFoundError):
        _engine(uow).create_place("volcano", Direction.NORTH, 1)

    assert uow.places.added == []
