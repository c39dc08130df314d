from typing import Optional

from app.client.api_client import ContactApiClient
from app.client.form_controller import ContactFormController
from app.client.list_view import ContactListView
from app.client.notifications import Notifier
from app.client.state_store import ContactStateStore
from app.exceptions.custom_exception import TransportError
from utils.logger import logger


class ContactPage:
    """Wires the form and the list around one state store and one API client."""

    def __init__(self, api: Optional[ContactApiClient] = None, notifier: Optional[Notifier] = None):
        self.api = api or ContactApiClient()
        self.notifier = notifier or Notifier()
        self.store = ContactStateStore()
        self.form = ContactFormController(self.api, self.store, self.notifier)
        self.list_view = ContactListView(self.store, self.form, self.api, self.notifier)
        self.error: Optional[str] = None

    async def __aenter__(self) -> "ContactPage":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()

    async def load(self) -> bool:
        try:
            contacts = await self.api.list_contacts()
        except TransportError as e:
            self.error = str(e)
            logger.error(f"Loading contacts failed: {e}")
            self.store.replace_all([])
            return False
        self.error = None
        self.store.replace_all(contacts)
        return True
