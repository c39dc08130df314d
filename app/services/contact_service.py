import json
from pathlib import Path
from typing import List, Optional

from app.exceptions.custom_exception import PersistenceError
from repositories.contact_repository import ContactRepository, to_document
from utils.logger import logger

FIXTURE_PATH = Path(__file__).resolve().parents[2] / "database" / "contacts.json"


def load_fixture(path: Path = FIXTURE_PATH) -> List[dict]:
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


class ContactService:

    def __init__(self, repository: ContactRepository):
        self.repository = repository

    async def list_contacts(self) -> List[dict]:
        contacts = await self.repository.find()
        logger.info(f"Fetched {len(contacts)} contact(s)")
        return contacts

    async def create_contact(self, draft: dict) -> dict:
        return await self.repository.create(draft)

    async def update_contact(self, record: dict) -> Optional[dict]:
        contact_id = self._require_id(record)
        return await self.repository.update_by_id(contact_id, record)

    async def delete_contact(self, payload: dict) -> Optional[dict]:
        contact_id = self._require_id(payload)
        return await self.repository.delete_by_id(contact_id)

    async def fill_db(self, fixture: Optional[List[dict]] = None) -> List[dict]:
        """Replace every stored contact with the fixture set and return the reloaded list."""
        records = fixture if fixture is not None else load_fixture()
        # An invalid fixture must leave the stored contacts untouched
        records = [to_document(record) for record in records]
        removed = await self.repository.delete_all()
        inserted = await self.repository.insert_many(records)
        logger.info(f"Seeded contacts: removed {removed}, inserted {inserted}")
        return await self.repository.find()

    @staticmethod
    def _require_id(payload: dict):
        contact_id = payload.get("_id") if isinstance(payload, dict) else None
        if not contact_id:
            raise PersistenceError("Missing contact id '_id'")
        return contact_id
