import copy
from typing import List, Optional

import pytest
from bson import ObjectId

from repositories.contact_repository import serialize_contact, to_document, to_object_id


class InMemoryContactRepository:
    """Stands in for ContactRepository, applying the same document schema."""

    def __init__(self):
        self.documents: List[dict] = []

    async def find(self) -> List[dict]:
        return [serialize_contact(doc) for doc in self.documents]

    async def create(self, draft: dict) -> dict:
        document = to_document(draft)
        document["_id"] = ObjectId()
        self.documents.append(document)
        return serialize_contact(document)

    async def update_by_id(self, contact_id, record: dict) -> Optional[dict]:
        object_id = to_object_id(contact_id)
        document = to_document(record)
        for index, existing in enumerate(self.documents):
            if existing["_id"] == object_id:
                document["_id"] = object_id
                self.documents[index] = document
                return serialize_contact(document)
        return None

    async def delete_by_id(self, contact_id) -> Optional[dict]:
        object_id = to_object_id(contact_id)
        for index, existing in enumerate(self.documents):
            if existing["_id"] == object_id:
                return serialize_contact(self.documents.pop(index))
        return None

    async def delete_all(self) -> int:
        removed = len(self.documents)
        self.documents = []
        return removed

    async def insert_many(self, records: List[dict]) -> int:
        for record in records:
            document = to_document(record)
            document["_id"] = ObjectId()
            self.documents.append(document)
        return len(records)


PETER = {
    "name": {"firstName": "Peter", "lastName": "Müller"},
    "email": "beispiel@web.de",
    "phoneNumber": "01523978452",
    "address": {"street": "Hauptstraße", "houseNumber": "12", "city": "Großschönau", "zipCode": "02779"},
}

ANNA = {
    "name": {"firstName": "Anna", "lastName": "Schmidt"},
    "email": "anna.schmidt@gmx.de",
    "phoneNumber": "01761234567",
    "address": {"street": "Bahnhofstraße", "houseNumber": "3", "city": "Dresden", "zipCode": "01067"},
}


@pytest.fixture
def repository():
    return InMemoryContactRepository()


@pytest.fixture
def peter():
    return copy.deepcopy(PETER)


@pytest.fixture
def anna():
    return copy.deepcopy(ANNA)
