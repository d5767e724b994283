"""Manual wiring: one function per collaborator, composed into a ready list screen."""

from contacts.application import (
    ContactsGateway,
    ContactsPresenter,
    ValidContactsInteractable,
    ValidContactsInteractor,
)
from contacts.config import SOURCE_FILE, Settings
from contacts.infrastructure import (
    ContactsArrayGateway,
    ContactsFileGateway,
    ContactsViewModelPresenter,
)
from contacts.ui import ContactsListScreen


def make_contacts_gateway(settings: Settings | None = None) -> ContactsGateway:
    settings = settings or Settings()
    if settings.contacts_source == SOURCE_FILE:
        return ContactsFileGateway(settings.contacts_file)
    return ContactsArrayGateway()


def make_contacts_presenter() -> ContactsPresenter:
    return ContactsViewModelPresenter()


def make_valid_contacts_interactor(
    presenter: ContactsPresenter,
    gateway: ContactsGateway | None = None,
) -> ValidContactsInteractable:
    return ValidContactsInteractor(gateway=gateway or make_contacts_gateway(), presenter=presenter)


def make_contacts_list_screen(settings: Settings | None = None) -> ContactsListScreen:
    """Build gateway, presenter, interactor and screen; the presenter is shared by the last two."""
    presenter = make_contacts_presenter()
    interactor = make_valid_contacts_interactor(
        presenter, gateway=make_contacts_gateway(settings)
    )
    return ContactsListScreen(interactor=interactor, presenter=presenter)
