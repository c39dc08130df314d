from typing import List, Optional


def replace_all(contacts: List[dict], new_contacts: List[dict]) -> List[dict]:
    return list(new_contacts)


def insert(contacts: List[dict], contact: dict) -> List[dict]:
    return [*contacts, contact]


def replace_by_id(contacts: List[dict], contact: dict) -> List[dict]:
    """Swap the first contact sharing ``contact``'s id; unknown ids leave the list as is."""
    updated = list(contacts)
    for index, existing in enumerate(updated):
        if existing.get("_id") == contact.get("_id"):
            updated[index] = contact
            break
    return updated


def remove_by_id(contacts: List[dict], contact: dict) -> List[dict]:
    return [existing for existing in contacts if existing.get("_id") != contact.get("_id")]


class ContactStateStore:
    """In-memory mirror of the persisted contacts, used only for rendering."""

    def __init__(self, contacts: Optional[List[dict]] = None):
        self._contacts: List[dict] = list(contacts or [])

    @property
    def contacts(self) -> List[dict]:
        return list(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def replace_all(self, contacts: List[dict]) -> None:
        self._contacts = replace_all(self._contacts, contacts)

    def insert(self, contact: dict) -> None:
        self._contacts = insert(self._contacts, contact)

    def replace_by_id(self, contact: dict) -> None:
        self._contacts = replace_by_id(self._contacts, contact)

    def remove_by_id(self, contact: dict) -> None:
        self._contacts = remove_by_id(self._contacts, contact)
