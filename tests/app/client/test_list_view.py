import pytest
from unittest.mock import AsyncMock, MagicMock

from app.client.form_controller import ContactFormController, FormMode
from app.client.list_view import EMPTY_MESSAGE, ContactListView, ContactRow
from app.client.notifications import ERROR, SUCCESS, Notifier
from app.client.state_store import ContactStateStore
from app.exceptions.custom_exception import TransportError


@pytest.fixture
def api():
    api = MagicMock()
    api.delete_contact = AsyncMock()
    return api


@pytest.fixture
def store(peter, anna):
    return ContactStateStore([{"_id": "1", **peter}, {"_id": "2", **anna}])


@pytest.fixture
def view(api, store):
    form = ContactFormController(api, store, Notifier())
    return ContactListView(store, form, api)


def test_rows_project_store_in_order(view):
    rows = view.rows()

    assert rows[0] == ContactRow(
        contact_id="1",
        title="Peter Müller",
        lines=["beispiel@web.de", "Hauptstraße 12", "02779 Großschönau", "01523978452"],
    )
    assert [row.contact_id for row in rows] == ["1", "2"]
    assert view.empty_message is None


def test_empty_store_shows_message(api):
    store = ContactStateStore()
    view = ContactListView(store, ContactFormController(api, store), api)
    assert view.rows() == []
    assert view.empty_message == EMPTY_MESSAGE


def test_edit_hands_contact_to_form(view, store):
    contact = store.contacts[1]
    view.edit(contact)
    assert view.form.mode == FormMode.EDIT
    assert view.form.draft == contact


@pytest.mark.asyncio
async def test_delete_removes_row_after_success(view, api, store, anna):
    contact = store.contacts[0]
    api.delete_contact.return_value = contact

    assert await view.delete(contact) is True

    api.delete_contact.assert_awaited_once_with("1")
    assert store.contacts == [{"_id": "2", **anna}]
    assert view.notifier.last.level == SUCCESS


@pytest.mark.asyncio
async def test_delete_failure_keeps_row_and_notifies(view, api, store):
    api.delete_contact.side_effect = TransportError("unreachable")

    assert await view.delete(store.contacts[0]) is False

    assert len(store) == 2
    assert view.notifier.last.level == ERROR
