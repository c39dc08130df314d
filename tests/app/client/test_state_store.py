from app.client import state_store
from app.client.state_store import ContactStateStore

A = {"_id": "a", "email": "a@web.de"}
B = {"_id": "b", "email": "b@web.de"}
C = {"_id": "c", "email": "c@web.de"}


def test_replace_all_overwrites_collection():
    store = ContactStateStore([A])
    store.replace_all([B, C])
    assert store.contacts == [B, C]


def test_insert_appends_to_end():
    store = ContactStateStore([A, B])
    store.insert(C)
    assert store.contacts == [A, B, C]


def test_insert_then_remove_restores_prior_collection():
    store = ContactStateStore([A, B])
    store.insert(C)
    store.remove_by_id(C)
    assert store.contacts == [A, B]


def test_replace_by_id_swaps_in_place():
    store = ContactStateStore([A, B, C])
    changed = {**B, "email": "neu@web.de"}
    store.replace_by_id(changed)
    assert store.contacts == [A, changed, C]


def test_replace_by_id_with_absent_id_is_noop():
    store = ContactStateStore([A, B])
    store.replace_by_id({"_id": "zzz", "email": "x@web.de"})
    assert store.contacts == [A, B]


def test_replace_by_id_only_touches_first_match():
    duplicate = {**A, "email": "dup@web.de"}
    changed = {**A, "email": "changed@web.de"}
    assert state_store.replace_by_id([A, duplicate], changed) == [changed, duplicate]


def test_remove_by_id_filters_every_match():
    duplicate = {**A, "email": "dup@web.de"}
    assert state_store.remove_by_id([A, B, duplicate], A) == [B]


def test_transitions_do_not_mutate_input():
    original = [A, B]
    state_store.insert(original, C)
    state_store.replace_by_id(original, {**A, "email": "x"})
    state_store.remove_by_id(original, A)
    assert original == [A, B]


def test_contacts_property_returns_copy():
    store = ContactStateStore([A])
    store.contacts.append(B)
    assert store.contacts == [A]
    assert len(store) == 1
