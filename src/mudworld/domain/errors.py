"""Domain error definitions.

Every error carries a ``message_key`` so callers can render a localised message.
"""

from __future__ import annotations

PLACE_NOT_FOUND = "place.not.found"
PLACE_CLASS_NOT_FOUND = "place.class.not.found"
PLACE_EXIT_EXISTS = "place.exit.exists"
PLACE_DIRECTION_UNKNOWN = "place.direction.unknown"


class WorldError(Exception):
    """Base class for domain errors raised by the world core."""

    message_key: str = "world.error"


class NotFoundError(WorldError, LookupError):
    """Raised when a referenced entity does not exist."""

    entity: str = "entity"

    def __init__(self, key: object) -> None:
        super().__init__(f"{self.entity} not found: {key}")
        self.key = key


class PlaceNotFoundError(NotFoundError):
    entity = "Place"
    message_key = PLACE_NOT_FOUND


class PlaceClassNotFoundError(NotFoundError):
    entity = "Place class"
    message_key = PLACE_CLASS_NOT_FOUND


class IllegalParameterError(WorldError, ValueError):
    """Raised when a well-formed request breaks a domain rule."""

    message_key = "world.illegal.parameter"


class ExitAlreadyExistsError(IllegalParameterError):
    message_key = PLACE_EXIT_EXISTS

    def __init__(self, place_code: int | None, direction: str) -> None:
        super().__init__(f"Place {place_code} already has an exit to {direction}")
        self.place_code = place_code
        self.direction = direction


class UnknownDirectionError(IllegalParameterError):
    message_key = PLACE_DIRECTION_UNKNOWN

    def __init__(self, direction: str) -> None:
        super().__init__(f"Unknown direction: {direction}")
        self.direction = direction
