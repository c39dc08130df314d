import copy
from enum import Enum
from typing import List, Optional

from app.client.api_client import ContactApiClient
from app.client.form_constraints import FIELD_PATHS, validate_draft
from app.client.notifications import Notifier
from app.client.state_store import ContactStateStore
from app.exceptions.custom_exception import ContactValidationError, TransportError
from app.schemas.contact_schema import blank_contact
from utils.logger import logger


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class ContactFormController:
    """
    Holds the single editable draft behind the contact form.

    In CREATE mode the draft is a blank template without ``_id``; in EDIT mode
    it is a copy of an existing contact whose ``_id`` never changes. The state
    store is only touched after the API call has succeeded.
    """

    def __init__(self, api: ContactApiClient, store: ContactStateStore, notifier: Optional[Notifier] = None):
        self.api = api
        self.store = store
        self.notifier = notifier or Notifier()
        self.mode = FormMode.CREATE
        self.draft: dict = blank_contact()
        self.invalid_fields: List[str] = []
        self.validated = False

    @property
    def is_edit_mode(self) -> bool:
        return self.mode == FormMode.EDIT

    @property
    def title(self) -> str:
        return "Edit contact" if self.is_edit_mode else "Create a new contact"

    def select_for_edit(self, contact: dict) -> None:
        self.draft = copy.deepcopy(contact)
        self.mode = FormMode.EDIT
        self.invalid_fields = []
        self.validated = False

    def change_field(self, field: str, value) -> None:
        if field not in FIELD_PATHS:
            raise KeyError(f"Unknown contact field: {field}")

        group, _, subfield = field.partition(".")
        if subfield:
            self.draft = {**self.draft, group: {**self.draft.get(group, {}), subfield: value}}
        else:
            self.draft = {**self.draft, group: value}

    def reset(self) -> None:
        self._clear()
        self.notifier.info("Form has been reset")

    async def submit(self) -> bool:
        self.validated = True
        try:
            validate_draft(self.draft)
        except ContactValidationError as e:
            self.invalid_fields = e.fields
            logger.info(f"Contact form rejected: {e}")
            return False
        self.invalid_fields = []

        try:
            if self.is_edit_mode:
                saved = await self._update()
            else:
                saved = await self._create()
        except TransportError as e:
            self.notifier.error(f"Saving the contact failed: {e}")
            return False

        # A vanished edit target also ends the edit
        self._clear()
        return saved

    async def _create(self) -> bool:
        payload = {key: value for key, value in self.draft.items() if key != "_id"}
        created = await self.api.create_contact(payload)
        self.store.insert(created)
        self.notifier.success("New contact has been created")
        return True

    async def _update(self) -> bool:
        updated = await self.api.update_contact(self.draft)
        if updated is None:
            self.notifier.error("Contact no longer exists")
            return False
        self.store.replace_by_id(updated)
        self.notifier.success("Contact has been updated")
        return True

    def _clear(self) -> None:
        self.draft = blank_contact()
        self.mode = FormMode.CREATE
        self.invalid_fields = []
        self.validated = False
