from typing import Any, List, Optional

import httpx

from app.exceptions.custom_exception import TransportError
from config import config
from utils.logger import logger

CONTACTS_PATH = "/api/contacts"


class ContactApiClient:
    """
    Async client for the ``/api/contacts`` resource.

    Every failure, whether the request never reached the server or the
    server answered with an unexpected status, surfaces as ``TransportError``.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.client = client or httpx.AsyncClient(base_url=base_url or config.API_BASE_URL, timeout=timeout)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def list_contacts(self) -> List[dict]:
        return await self._send("GET", expected_status=200)

    async def create_contact(self, draft: dict) -> dict:
        return await self._send("POST", json=draft, expected_status=201)

    async def update_contact(self, contact: dict) -> Optional[dict]:
        return await self._send("PATCH", json=contact, expected_status=200)

    async def delete_contact(self, contact_id: str) -> Optional[dict]:
        return await self._send("DELETE", json={"_id": contact_id}, expected_status=200)

    async def _send(self, method: str, expected_status: int, json: Any = None):
        try:
            response = await self.client.request(method, CONTACTS_PATH, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {CONTACTS_PATH} failed: {e}")
            raise TransportError(f"Could not reach contacts API: {e}") from e

        if response.status_code != expected_status:
            body = self._body(response)
            logger.error(f"{method} {CONTACTS_PATH} returned {response.status_code}: {body}")
            raise TransportError(
                f"Contacts API answered {response.status_code}",
                status_code=response.status_code,
                body=body
            )
        return self._body(response)

    @staticmethod
    def _body(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            return response.text or None
