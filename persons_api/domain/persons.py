"""Person entity and identifier rules."""
from __future__ import annotations

from dataclasses import dataclass, fields

from persons_api.domain.colours import FavouriteColour, normalize_colour


class PersonError(ValueError):
    """Base exception for person validation."""


class InvalidPersonIdError(PersonError):
    """Raised when an identifier is not a positive integer."""


class InvalidPersonError(PersonError):
    """Raised when a required person field is blank."""


# largest value a SQL BIGINT / SQLite INTEGER column can hold
MAX_PERSON_ID = 2**63 - 1


def validate_person_id(value: int) -> int:
    """Return value when it is a positive int, else raise InvalidPersonIdError."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidPersonIdError(f"Person id must be greater than 0, got {value!r}")
    return value


@dataclass(frozen=True)
class Person:
    id: int
    first_name: str
    last_name: str
    zip_code: str
    city: str
    colour: FavouriteColour

    def __post_init__(self):
        validate_person_id(self.id)
        for field in fields(self):
            if field.name in ("id", "colour"):
                continue
            value = getattr(self, field.name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidPersonError(f"{field.name} must not be empty")
            # frozen dataclass: bypass __setattr__ to store the trimmed value
            object.__setattr__(self, field.name, value.strip())
        object.__setattr__(self, "colour", normalize_colour(self.colour))
