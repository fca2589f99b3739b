"""Person use cases (lookup, filtering by colour, creation)."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from persons_api.domain.colours import normalize_colour
from persons_api.domain.persons import Person
from persons_api.repositories.person_repository import SQLPersonRepository

logger = logging.getLogger(__name__)

# max + 1 id assignment is a read-then-write; one writer per process at a time.
_create_lock = threading.Lock()


class PersonServiceError(Exception):
    """Base exception for person use cases."""


class PersonNotFoundError(PersonServiceError):
    """Raised when no person has the requested identifier."""

    def __init__(self, person_id: int):
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


class PersonValidationError(PersonServiceError):
    """Raised when a create request is missing required fields."""

    def __init__(self, missing: list[str]):
        super().__init__(f"All fields are required; missing: {', '.join(missing)}")
        self.missing = missing


class PersonService:
    """Provides person listing, lookup and creation."""

    def __init__(self, repository: Optional[SQLPersonRepository] = None) -> None:
        self.repository = repository or SQLPersonRepository()

    def list_persons(self) -> list[Person]:
        return self.repository.list_persons()

    def get_person(self, person_id: int) -> Person:
        person = self.repository.get_person(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    def get_persons_by_colour(self, colour: str) -> list[Person]:
        return self.repository.get_persons_by_colour(normalize_colour(colour))

    def create_person(
        self,
        first_name: str | None,
        last_name: str | None,
        zip_code: str | None,
        city: str | None,
        colour: str | None,
    ) -> Person:
        values = {
            "name": first_name,
            "lastname": last_name,
            "zipcode": zip_code,
            "city": city,
            "color": colour,
        }
        missing = [key for key, value in values.items() if not (value or "").strip()]
        if missing:
            raise PersonValidationError(missing)
        favourite = normalize_colour(colour)
        with _create_lock:
            next_id = self.repository.max_person_id() + 1
            person = Person(
                id=next_id,
                first_name=first_name,
                last_name=last_name,
                zip_code=zip_code,
                city=city,
                colour=favourite,
            )
            self.repository.add_person(person)
        logger.info("Created person %d (%s)", person.id, person.colour)
        return person
