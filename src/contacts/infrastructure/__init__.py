"""Infrastructure layer: concrete gateways and the presenter behind the application ports."""

from contacts.infrastructure.array_gateway import DEFAULT_CONTACTS, ContactsArrayGateway
from contacts.infrastructure.file_gateway import ContactsFileGateway, parse_contacts
from contacts.infrastructure.presenter import ContactsViewModelPresenter, present

__all__ = [
    "DEFAULT_CONTACTS",
    "ContactsArrayGateway",
    "ContactsFileGateway",
    "ContactsViewModelPresenter",
    "parse_contacts",
    "present",
]
