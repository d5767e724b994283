"""Unit tests for ContactsViewModelPresenter: formatting rule and weak binder."""

import gc

from contacts.domain import Contact, ContactError, ContactViewModel
from contacts.infrastructure import ContactsViewModelPresenter, present

from doubles import RecordingBinder


def test_present_formats_street_city_state_without_country() -> None:
    contact = Contact(street="Rua da Vala, 666", city="São Paulo", state="SP", country="BR")
    assert present(contact) == ContactViewModel(full_address="Rua da Vala, 666 - São Paulo, SP")


def test_finded_binds_one_view_model_per_contact_in_order() -> None:
    presenter = ContactsViewModelPresenter()
    binder = RecordingBinder()
    presenter.binder = binder

    presenter.finded(
        [
            Contact(street="1 First St", city="Lisbon", state="LX", country="PT"),
            Contact(street="2 Second St", city="Porto", state="PO", country="PT"),
        ]
    )

    assert binder.calls == [
        [
            ContactViewModel(full_address="1 First St - Lisbon, LX"),
            ContactViewModel(full_address="2 Second St - Porto, PO"),
        ]
    ]


def test_finded_with_empty_list_binds_empty_list() -> None:
    presenter = ContactsViewModelPresenter()
    binder = RecordingBinder()
    presenter.binder = binder
    presenter.finded([])
    assert binder.calls == [[]]


def test_finded_without_binder_is_silent() -> None:
    presenter = ContactsViewModelPresenter()
    assert presenter.binder is None
    presenter.finded([Contact(street="S", city="C", state="ST", country="BR")])


def test_binder_is_not_kept_alive() -> None:
    calls = []
    presenter = ContactsViewModelPresenter()
    binder = RecordingBinder(calls)
    presenter.binder = binder
    assert presenter.binder is binder

    del binder
    gc.collect()

    assert presenter.binder is None
    presenter.finded([Contact(street="S", city="C", state="ST", country="BR")])
    assert calls == []


def test_binder_can_be_detached() -> None:
    presenter = ContactsViewModelPresenter()
    binder = RecordingBinder()
    presenter.binder = binder
    presenter.binder = None
    presenter.finded([])
    assert binder.calls == []


def test_failed_accepts_every_error_without_binding() -> None:
    presenter = ContactsViewModelPresenter()
    binder = RecordingBinder()
    presenter.binder = binder
    for error in ContactError:
        presenter.failed(error)
    assert binder.calls == []
