"""
Service for the people collection.

People are created with a name, an e‑mail address and a role.  After
creation only the role may change.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from team_tracker_api.app.schemas.person import Person, PersonCreate, PersonUpdate
from team_tracker_api.app.services.store import RecordStore

logger = logging.getLogger(__name__)


def _seed_people() -> List[Person]:
    return [
        Person(id=1, name="James", email="j@correo.com", role="Dev"),
        Person(id=2, name="Maria", email="maria@correo.com", role="QA"),
    ]


class PeopleService(RecordStore[Person]):
    """In‑memory store of :class:`Person` records."""

    entity = "person"
    seed = staticmethod(_seed_people)

    def list_people(self) -> List[Person]:
        return self.all()

    def get_person(self, person_id: int) -> Optional[Person]:
        return self._find(person_id)

    def create_person(self, data: PersonCreate) -> Person:
        return self._insert(
            lambda new_id: Person(id=new_id, name=data.name, email=data.email, role=data.role)
        )

    def update_person(self, person_id: int, data: PersonUpdate) -> Optional[Person]:
        """Overwrite the role of a person.

        Returns the (possibly unchanged) person, or ``None`` if no
        person has ``person_id``.  An empty role is ignored.
        """
        with self._lock:
            person = self._find(person_id)
            if person is None:
                return None
            if data.role:
                person.role = data.role
                logger.info("Updated role of person %s", person_id)
            return person

    def delete_person(self, person_id: int) -> bool:
        return self._remove(person_id)
