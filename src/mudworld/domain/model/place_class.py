"""Place classes: shared templates for places."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(eq=False, kw_only=True)
class PlaceClassAttr:
    """Default value for one attribute of a place class."""

    code: str
    value: int


@dataclass(eq=False, kw_only=True)
class PlaceClass:
    """Reference data describing a kind of place.

    A place class is shared by many places and never owned by one of them.
    ``demised_place_class_code`` names the class a destroyed place turns into
    instead of disappearing.
    """

    code: str
    name: str
    demised_place_class_code: str | None = None

    _attrs: list[PlaceClassAttr] = field(default_factory=list["PlaceClassAttr"], repr=False)

    @classmethod
    def create(
        cls,
        *,
        code: str,
        name: str,
        attributes: Mapping[str, int] | None = None,
        demised_place_class_code: str | None = None,
    ) -> PlaceClass:
        place_class = cls(
            code=code,
            name=name,
            demised_place_class_code=demised_place_class_code,
        )
        for attr_code, value in (attributes or {}).items():
            place_class.set_attribute(attr_code, value)
        return place_class

    @property
    def attributes(self) -> dict[str, int]:
        return {attr.code: attr.value for attr in self._attrs}

    def set_attribute(self, code: str, value: int) -> None:
        for attr in self._attrs:
            if attr.code == code:
                attr.value = value
                return
        self._attrs.append(PlaceClassAttr(code=code, value=value))
