from fastapi import Request, Depends, HTTPException

from app.services.contact_service import ContactService
from config import config
from database.connection import MongoConnectionPool
from repositories.contact_repository import ContactRepository


def get_connection_pool(request: Request) -> MongoConnectionPool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise HTTPException(status_code=500, detail="Database connection pool is not initialised")
    return pool


def get_contact_service(pool: MongoConnectionPool = Depends(get_connection_pool)) -> ContactService:
    return ContactService(ContactRepository(pool, config.CONTACTS_COLLECTION))
