from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from persons_api.domain.colours import ColourError
from persons_api.domain.persons import InvalidPersonIdError, Person, PersonError, validate_person_id
from persons_api.repositories.person_repository import DuplicatePersonIdError
from persons_api.services.person_service import (
    PersonNotFoundError,
    PersonService,
    PersonValidationError,
)

router = APIRouter(prefix="/persons", tags=["persons"])


class CreatePersonRequest(BaseModel):
    # optional so blank and missing fields get the same 400
    name: Optional[str] = None
    lastname: Optional[str] = None
    zipcode: Optional[str] = None
    city: Optional[str] = None
    color: Optional[str] = None


class PersonResponse(BaseModel):
    id: int
    name: str
    lastname: str
    zipcode: str
    city: str
    color: str


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService not configured")
    return svc


def _to_response(person: Person) -> PersonResponse:
    return PersonResponse(
        id=person.id,
        name=person.first_name,
        lastname=person.last_name,
        zipcode=person.zip_code,
        city=person.city,
        color=person.colour.value,
    )


@router.get("", response_model=List[PersonResponse])
def list_persons(request: Request):
    svc = _get_person_service(request)
    return [_to_response(p) for p in svc.list_persons()]


@router.get("/color/{color}", response_model=List[PersonResponse])
def list_persons_by_colour(color: str, request: Request):
    svc = _get_person_service(request)
    try:
        persons = svc.get_persons_by_colour(color)
    except ColourError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Unsupported color.")
    return [_to_response(p) for p in persons]


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(person_id: int, request: Request):
    try:
        validate_person_id(person_id)
    except InvalidPersonIdError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "id must be > 0")
    svc = _get_person_service(request)
    try:
        person = svc.get_person(person_id)
    except PersonNotFoundError:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Person not found")
    return _to_response(person)


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
def create_person(payload: CreatePersonRequest, request: Request, response: Response):
    svc = _get_person_service(request)
    try:
        person = svc.create_person(
            first_name=payload.name,
            last_name=payload.lastname,
            zip_code=payload.zipcode,
            city=payload.city,
            colour=payload.color,
        )
    except PersonValidationError:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            "All fields (name, lastname, zipcode, city, color) are required.",
        )
    except ColourError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Unsupported color.")
    except PersonError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(exc))
    except DuplicatePersonIdError:
        raise HTTPException(status.HTTP_409_CONFLICT, "Person id already taken, retry.")
    response.headers["Location"] = f"/persons/{person.id}"
    return _to_response(person)
