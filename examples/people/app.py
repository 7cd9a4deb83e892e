"""People API — a small JSON CRUD service.

Demonstrates one pattern serving several methods, ``{id}`` parameters
parsed by the handler, ``HTTPError`` for client errors, request logging
middleware, and a custom not-found handler.

Run:
    PORT=9000 python app.py
    waymark run app:router --port 9000
"""

import json
import logging
import os
import threading
from dataclasses import asdict, dataclass
from typing import Any

from waymark import HTTPError, Request, RequestLogger, Response, Router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s: %(message)s")


@dataclass(slots=True)
class Person:
    id: int
    name: str
    age: int
    student: bool


class PeopleStore:
    """In-memory store. Handlers run concurrently, so access is locked."""

    def __init__(self) -> None:
        self._people: dict[int, Person] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def all(self) -> list[Person]:
        with self._lock:
            return list(self._people.values())

    def get(self, person_id: int) -> Person | None:
        with self._lock:
            return self._people.get(person_id)

    def create(self, name: str, age: int, student: bool) -> Person:
        with self._lock:
            person = Person(self._next_id, name, age, student)
            self._people[person.id] = person
            self._next_id += 1
            return person

    def replace(self, person_id: int, name: str, age: int, student: bool) -> Person | None:
        with self._lock:
            if person_id not in self._people:
                return None
            person = Person(person_id, name, age, student)
            self._people[person_id] = person
            return person

    def delete(self, person_id: int) -> bool:
        with self._lock:
            return self._people.pop(person_id, None) is not None


store = PeopleStore()
router = Router()
router.use(RequestLogger())


def _person_id(request: Request) -> int:
    try:
        return int(request.path_params["id"])
    except ValueError:
        raise HTTPError(400, "Invalid person ID") from None


_FIELD_TYPES: dict[str, type] = {"name": str, "age": int, "student": bool}


async def _person_fields(request: Request) -> dict[str, Any]:
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPError(400, str(exc)) from exc
    if not isinstance(data, dict):
        raise HTTPError(400, "Expected a JSON object")

    fields: dict[str, Any] = {"name": "", "age": 0, "student": False}
    for name, kind in _FIELD_TYPES.items():
        value = data.get(name)
        if value is None:
            continue
        # Exact type: JSON true is not an age, 12.7 and "12" are not ints.
        if type(value) is not kind:
            raise HTTPError(400, f"Invalid person: {name} must be a JSON {kind.__name__}")
        fields[name] = value
    return fields


@router.get("/people")
def list_people(request: Request) -> list[dict[str, Any]]:
    return [asdict(person) for person in store.all()]


@router.post("/people")
async def create_person(request: Request) -> Response:
    person = store.create(**await _person_fields(request))
    return Response.json(asdict(person), status=201)


@router.get("/people/{id}")
def get_person(request: Request) -> dict[str, Any]:
    person = store.get(_person_id(request))
    if person is None:
        raise HTTPError(404, "Person not found")
    return asdict(person)


@router.put("/people/{id}")
async def update_person(request: Request) -> dict[str, Any]:
    person_id = _person_id(request)
    person = store.replace(person_id, **await _person_fields(request))
    if person is None:
        raise HTTPError(404, "Person not found")
    return asdict(person)


@router.delete("/people/{id}")
def delete_person(request: Request) -> Response:
    if not store.delete(_person_id(request)):
        raise HTTPError(404, "Person not found")
    return Response(status=204)


@router.set_not_found
def not_found(request: Request) -> Response:
    return Response("Custom 404: Page not found", status=404)


def main() -> None:
    router.run(port=int(os.environ.get("PORT", "9000")))


if __name__ == "__main__":
    main()
