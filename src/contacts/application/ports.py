"""Application ports (interfaces). Implemented by infrastructure adapters and the UI."""

from collections.abc import Callable
from typing import Protocol

from contacts.application.result import Result
from contacts.domain import Contact, ContactError, ContactViewModel

ContactsCompletionHandler = Callable[[Result[list[Contact]]], None]


class ContactsGateway(Protocol):
    """Fetches raw contacts from a contact source."""

    def all(self, completion_handler: ContactsCompletionHandler) -> None:
        """Call completion_handler exactly once with every contact or a Failure. Never raises."""
        ...


class ContactsListBindable(Protocol):
    """UI-side receiver of finished view-models."""

    def bind(self, view_models: list[ContactViewModel]) -> None:
        """Replace whatever was displayed with view_models. Safe to call repeatedly."""
        ...


class ContactsPresenter(Protocol):
    """Turns domain contacts into view-models for a weakly held binder."""

    binder: ContactsListBindable | None

    def finded(self, contacts: list[Contact]) -> None:
        ...

    def failed(self, error: ContactError) -> None:
        ...


class ValidContactsInteractable(Protocol):
    """Use case: show every contact that has a country."""

    def all(self) -> None:
        ...
