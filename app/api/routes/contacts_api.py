import logging
from fastapi import APIRouter, HTTPException, Depends, Body
from starlette import status

from app.api.routes.deps import get_contact_service
from app.exceptions.custom_exception import PersistenceError
from app.services.contact_service import ContactService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


def persistence_failure(action: str, e: PersistenceError) -> HTTPException:
    logger.error(f"Failed to {action}: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": type(e).__name__, "message": str(e)}
    )


@router.get("/contacts")
async def list_contacts(service: ContactService = Depends(get_contact_service)):
    try:
        return await service.list_contacts()
    except PersistenceError as e:
        raise persistence_failure("list contacts", e)


@router.post("/contacts", status_code=status.HTTP_201_CREATED)
async def create_contact(payload: dict = Body(...), service: ContactService = Depends(get_contact_service)):
    try:
        return await service.create_contact(payload)
    except PersistenceError as e:
        raise persistence_failure("create contact", e)


@router.patch("/contacts")
async def update_contact(payload: dict = Body(...), service: ContactService = Depends(get_contact_service)):
    try:
        return await service.update_contact(payload)
    except PersistenceError as e:
        raise persistence_failure("update contact", e)


@router.delete("/contacts")
async def delete_contact(payload: dict = Body(...), service: ContactService = Depends(get_contact_service)):
    try:
        return await service.delete_contact(payload)
    except PersistenceError as e:
        raise persistence_failure("delete contact", e)


@router.get("/fillDB")
async def fill_db(service: ContactService = Depends(get_contact_service)):
    try:
        contacts = await service.fill_db()
    except PersistenceError as e:
        raise persistence_failure("seed contacts", e)
    return {"contacts": contacts}
