"""
Smoke tests for SQLPersonRepository against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from persons_api.domain.colours import FavouriteColour
from persons_api.domain.persons import Person
from persons_api.repositories.person_repository import DuplicatePersonIdError, SQLPersonRepository


def _person(person_id: int, first_name: str, colour: FavouriteColour, city: str = "Hierach") -> Person:
    return Person(
        id=person_id,
        first_name=first_name,
        last_name=f"{first_name}sen",
        zip_code="43246",
        city=city,
        colour=colour,
    )


def test_add_and_get(temp_db):
    repo = SQLPersonRepository()
    repo.add_person(_person(7, "Anders", FavouriteColour.GRUEN, city="Schweden - ☀"))
    person = repo.get_person(7)
    assert person is not None
    assert person.city == "Schweden - ☀"
    assert person.colour is FavouriteColour.GRUEN
    assert repo.get_person(8) is None


def test_list_is_ordered_by_id(temp_db):
    repo = SQLPersonRepository()
    repo.add_person(_person(3, "Klaus", FavouriteColour.GRUEN))
    repo.add_person(_person(1, "Hans", FavouriteColour.BLAU))
    repo.add_person(_person(2, "Peter", FavouriteColour.GRUEN))
    assert [p.id for p in repo.list_persons()] == [1, 2, 3]


def test_filter_by_colour(temp_db):
    repo = SQLPersonRepository()
    repo.add_person(_person(1, "Hans", FavouriteColour.BLAU))
    repo.add_person(_person(3, "Klaus", FavouriteColour.GRUEN))
    repo.add_person(_person(2, "Peter", FavouriteColour.GRUEN))
    persons = repo.get_persons_by_colour(FavouriteColour.GRUEN)
    assert [p.id for p in persons] == [2, 3]
    assert repo.get_persons_by_colour(FavouriteColour.WEISS) == []


def test_duplicate_id_is_rejected(temp_db):
    repo = SQLPersonRepository()
    repo.add_person(_person(1, "Hans", FavouriteColour.BLAU))
    with pytest.raises(DuplicatePersonIdError) as excinfo:
        repo.add_person(_person(1, "Peter", FavouriteColour.GRUEN))
    assert excinfo.value.person_id == 1
    assert repo.get_person(1).first_name == "Hans"


def test_max_person_id(temp_db):
    repo = SQLPersonRepository()
    assert repo.max_person_id() == 0
    repo.add_person(_person(10, "Klaus", FavouriteColour.GRUEN))
    repo.add_person(_person(4, "Hans", FavouriteColour.BLAU))
    assert repo.max_person_id() == 10


def test_upsert_inserts_then_updates(temp_db):
    repo = SQLPersonRepository()
    assert repo.upsert_persons([_person(1, "Hans", FavouriteColour.BLAU), _person(2, "Peter", FavouriteColour.ROT)]) == 2
    assert repo.upsert_persons([_person(2, "Petra", FavouriteColour.GELB)]) == 1
    persons = repo.list_persons()
    assert [(p.id, p.first_name, p.colour) for p in persons] == [
        (1, "Hans", FavouriteColour.BLAU),
        (2, "Petra", FavouriteColour.GELB),
    ]


def test_get_person_beyond_integer_range_is_missing(temp_db):
    repo = SQLPersonRepository()
    repo.add_person(_person(1, "Hans", FavouriteColour.BLAU))
    assert repo.get_person(2**63) is None
    assert repo.get_person(2**63 - 1) is None
