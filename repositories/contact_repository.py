from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.exceptions.custom_exception import PersistenceError
from app.schemas.contact_schema import ContactDocument
from database.connection import MongoConnectionPool
from utils.logger import logger


def serialize_contact(document: Optional[dict]) -> Optional[dict]:
    if document is None:
        return None
    document = dict(document)
    document["_id"] = str(document["_id"])
    return document


def to_object_id(contact_id) -> ObjectId:
    if isinstance(contact_id, ObjectId):
        return contact_id
    # ObjectId(None) would mint a fresh id instead of failing
    if not isinstance(contact_id, str) or not contact_id:
        raise PersistenceError(f"Invalid contact id: {contact_id!r}")
    try:
        return ObjectId(contact_id)
    except InvalidId as e:
        raise PersistenceError(f"Invalid contact id: {contact_id!r}") from e


def to_document(record: dict) -> dict:
    try:
        return ContactDocument.model_validate(record).model_dump()
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise PersistenceError(f"Contact validation failed: {', '.join(fields)}") from e


class ContactRepository:
    def __init__(self, pool: MongoConnectionPool, collection_name: str = "contacts"):
        self.pool = pool
        self.collection_name = collection_name

    async def _collection(self):
        db = await self.pool.open()
        return db[self.collection_name]

    async def find(self) -> List[dict]:
        collection = await self._collection()
        try:
            documents = await collection.find().to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to list contacts: {e}") from e
        return [serialize_contact(doc) for doc in documents]

    async def create(self, draft: dict) -> dict:
        document = to_document(draft)
        collection = await self._collection()
        try:
            result = await collection.insert_one(document)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to create contact: {e}") from e
        logger.info(f"Contact created with id {result.inserted_id}")
        return serialize_contact({**document, "_id": result.inserted_id})

    async def update_by_id(self, contact_id, record: dict) -> Optional[dict]:
        object_id = to_object_id(contact_id)
        document = to_document(record)
        collection = await self._collection()
        try:
            updated = await collection.find_one_and_replace(
                {"_id": object_id},
                document,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise PersistenceError(f"Failed to update contact {contact_id}: {e}") from e

        if updated is None:
            logger.warning(f"No contact found to update for id {contact_id}")
        else:
            logger.info(f"Contact {contact_id} updated")
        return serialize_contact(updated)

    async def delete_by_id(self, contact_id) -> Optional[dict]:
        object_id = to_object_id(contact_id)
        collection = await self._collection()
        try:
            removed = await collection.find_one_and_delete({"_id": object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Failed to delete contact {contact_id}: {e}") from e

        if removed is None:
            logger.warning(f"No contact found to delete for id {contact_id}")
        else:
            logger.info(f"Contact {contact_id} deleted")
        return serialize_contact(removed)

    async def delete_all(self) -> int:
        collection = await self._collection()
        try:
            result = await collection.delete_many({})
        except PyMongoError as e:
            raise PersistenceError(f"Failed to clear contacts: {e}") from e
        return result.deleted_count

    async def insert_many(self, records: List[dict]) -> int:
        documents = [to_document(record) for record in records]
        if not documents:
            return 0
        collection = await self._collection()
        try:
            result = await collection.insert_many(documents)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to insert contacts: {e}") from e
        return len(result.inserted_ids)
