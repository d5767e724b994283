"""Application layer: use case, ports, and the fetch Result. Depends only on domain."""

from contacts.application.ports import (
    ContactsCompletionHandler,
    ContactsGateway,
    ContactsListBindable,
    ContactsPresenter,
    ValidContactsInteractable,
)
from contacts.application.result import Failure, Result, Success
from contacts.application.valid_contacts_interactor import (
    ValidContactsInteractor,
    filter_valid_contacts,
)

__all__ = [
    "ContactsCompletionHandler",
    "ContactsGateway",
    "ContactsListBindable",
    "ContactsPresenter",
    "Failure",
    "Result",
    "Success",
    "ValidContactsInteractable",
    "ValidContactsInteractor",
    "filter_valid_contacts",
]
