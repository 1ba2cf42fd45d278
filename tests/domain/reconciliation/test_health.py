from __future__ import annotations

from mudworld.domain.reconciliation import evaluate_health
from tests.helpers.world import make_place, make_place_class


def _hp(place_attrs: dict[str, int], requested: dict[str, int]) -> tuple[bool, int | None]:
    place = make_place(make_place_class(), attrs=place_attrs)
    destroyed = evaluate_health(place, requested)
    hp = place.find_attr("HP")
    return destroyed, hp.value if hp is not None else None


def test_hp_above_max_is_clamped() -> None:
    destroyed, hp = _hp({"HP": 150, "MAXHP": 100}, {"HP": 150, "MAXHP": 100})

    assert destroyed is False
    assert hp == 100


def test_zero_hp_destroys() -> None:
    destroyed, hp = _hp({"HP": 0, "MAXHP": 100}, {"HP": 0, "MAXHP": 100})

    assert destroyed is True
    assert hp == 0


def test_negative_hp_destroys() -> None:
    destroyed, _ = _hp({"HP": -5, "MAXHP": 100}, {"HP": -5, "MAXHP": 100})

    assert destroyed is True


def test_missing_requested_hp_counts_as_zero() -> None:
    destroyed, _ = _hp({"MAXHP": 100}, {"MAXHP": 100})

    assert destroyed is True


def test_zero_max_hp_is_indestructible() -> None:
    destroyed, hp = _hp({"HP": 0, "MAXHP": 0}, {"HP": 0, "MAXHP": 0})

    assert destroyed is False
    assert hp == 0


def test_missing_max_hp_is_indestructible() -> None:
    destroyed, _ = _hp({}, {"HP": -10})

    assert destroyed is False


def test_healthy_place_is_left_alone() -> None:
    destroyed, hp = _hp({"HP": 40, "MAXHP": 100}, {"HP": 40, "MAXHP": 100})

    assert destroyed is False
    assert hp == 40
