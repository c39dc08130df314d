from dataclasses import dataclass
from typing import List, Optional

from app.client.api_client import ContactApiClient
from app.client.form_controller import ContactFormController
from app.client.notifications import Notifier
from app.client.state_store import ContactStateStore
from app.exceptions.custom_exception import TransportError

EMPTY_MESSAGE = "The list is still empty, create a contact"


@dataclass(frozen=True)
class ContactRow:
    contact_id: Optional[str]
    title: str
    lines: List[str]


def to_row(contact: dict) -> ContactRow:
    name = contact.get("name") or {}
    address = contact.get("address") or {}
    return ContactRow(
        contact_id=contact.get("_id"),
        title=f"{name.get('firstName', '')} {name.get('lastName', '')}".strip(),
        lines=[
            contact.get("email", ""),
            f"{address.get('street', '')} {address.get('houseNumber', '')}".strip(),
            f"{address.get('zipCode', '')} {address.get('city', '')}".strip(),
            contact.get("phoneNumber", ""),
        ],
    )


class ContactListView:

    def __init__(self, store: ContactStateStore, form: ContactFormController, api: ContactApiClient,
                 notifier: Optional[Notifier] = None):
        self.store = store
        self.form = form
        self.api = api
        self.notifier = notifier or form.notifier

    def rows(self) -> List[ContactRow]:
        return [to_row(contact) for contact in self.store.contacts]

    @property
    def empty_message(self) -> Optional[str]:
        return EMPTY_MESSAGE if len(self.store) == 0 else None

    def edit(self, contact: dict) -> None:
        self.form.select_for_edit(contact)

    async def delete(self, contact: dict) -> bool:
        try:
            await self.api.delete_contact(contact["_id"])
        except TransportError as e:
            self.notifier.error(f"Deleting the contact failed: {e}")
            return False
        self.store.remove_by_id(contact)
        self.notifier.success("Contact has been deleted")
        return True
