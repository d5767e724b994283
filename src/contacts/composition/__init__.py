"""Composition: wiring of gateways, presenter, interactor and screens. The core never imports this."""

from contacts.composition.component import ContactsListComponent, RootComponent
from contacts.composition.factories import (
    make_contacts_gateway,
    make_contacts_list_screen,
    make_contacts_presenter,
    make_valid_contacts_interactor,
)

__all__ = [
    "ContactsListComponent",
    "RootComponent",
    "make_contacts_gateway",
    "make_contacts_list_screen",
    "make_contacts_presenter",
    "make_valid_contacts_interactor",
]
