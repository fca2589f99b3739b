"""Person data access backed by SQLAlchemy."""
from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from persons_api.db.models import PersonRecord
from persons_api.db.session import get_session
from persons_api.domain.colours import FavouriteColour, normalize_colour
from persons_api.domain.persons import MAX_PERSON_ID, Person


class DuplicatePersonIdError(Exception):
    """Raised when adding a person whose identifier is already stored."""

    def __init__(self, person_id: int):
        super().__init__(f"Person with id {person_id} already exists.")
        self.person_id = person_id


def _to_domain(record: PersonRecord) -> Person:
    return Person(
        id=record.person_id,
        first_name=record.first_name,
        last_name=record.last_name,
        zip_code=record.zip_code,
        city=record.city,
        colour=normalize_colour(record.colour),
    )


def _apply(record: PersonRecord, person: Person) -> PersonRecord:
    record.person_id = person.id
    record.first_name = person.first_name
    record.last_name = person.last_name
    record.zip_code = person.zip_code
    record.city = person.city
    record.colour = person.colour.value
    return record


class SQLPersonRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def list_persons(self) -> list[Person]:
        with get_session() as session:
            stmt = select(PersonRecord).order_by(PersonRecord.person_id)
            return [_to_domain(r) for r in session.execute(stmt).scalars().all()]

    def get_person(self, person_id: int) -> Optional[Person]:
        if person_id > MAX_PERSON_ID:
            return None
        with get_session() as session:
            stmt = select(PersonRecord).where(PersonRecord.person_id == person_id)
            record = session.execute(stmt).scalar_one_or_none()
            return _to_domain(record) if record else None

    def get_persons_by_colour(self, colour: FavouriteColour) -> list[Person]:
        colour = normalize_colour(colour)
        with get_session() as session:
            stmt = (
                select(PersonRecord)
                .where(PersonRecord.colour == colour.value)
                .order_by(PersonRecord.person_id)
            )
            return [_to_domain(r) for r in session.execute(stmt).scalars().all()]

    def max_person_id(self) -> int:
        with get_session() as session:
            value = session.execute(select(func.max(PersonRecord.person_id))).scalar()
            return int(value or 0)

    def add_person(self, person: Person) -> Person:
        with get_session() as session:
            stmt = select(PersonRecord.pk).where(PersonRecord.person_id == person.id).limit(1)
            if session.execute(stmt).first() is not None:
                raise DuplicatePersonIdError(person.id)
            session.add(_apply(PersonRecord(), person))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicatePersonIdError(person.id) from exc
        return person

    def upsert_persons(self, persons: Iterable[Person]) -> int:
        """Insert or update persons by identifier in a single transaction."""
        count = 0
        with get_session() as session:
            for person in persons:
                stmt = select(PersonRecord).where(PersonRecord.person_id == person.id)
                record = session.execute(stmt).scalar_one_or_none()
                if record is None:
                    session.add(_apply(PersonRecord(), person))
                else:
                    _apply(record, person)
                count += 1
            session.commit()
        return count
