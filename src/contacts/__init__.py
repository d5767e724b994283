"""
Valid contacts: clean-architecture layout.

- domain: entities (Contact, ContactViewModel, ContactError). No outer dependencies.
- application: use case (ValidContactsInteractor), ports, fetch Result.
- infrastructure: adapters (ContactsArrayGateway, ContactsFileGateway, ContactsViewModelPresenter).
- ui: ContactsListScreen, the binder at the edge.
- composition: factories and scoped components that wire the above.
"""

from contacts.application import (
    ContactsGateway,
    ContactsListBindable,
    ContactsPresenter,
    Failure,
    Result,
    Success,
    ValidContactsInteractable,
    ValidContactsInteractor,
    filter_valid_contacts,
)
from contacts.domain import Contact, ContactError, ContactViewModel
from contacts.infrastructure import (
    ContactsArrayGateway,
    ContactsFileGateway,
    ContactsViewModelPresenter,
)

__all__ = [
    "Contact",
    "ContactError",
    "ContactViewModel",
    "ContactsArrayGateway",
    "ContactsFileGateway",
    "ContactsGateway",
    "ContactsListBindable",
    "ContactsPresenter",
    "ContactsViewModelPresenter",
    "Failure",
    "Result",
    "Success",
    "ValidContactsInteractable",
    "ValidContactsInteractor",
    "filter_valid_contacts",
]
