"""Presenter: domain contacts -> ContactViewModel list, pushed to a weakly held binder."""

import logging
import weakref

from contacts.application.ports import ContactsListBindable
from contacts.domain import Contact, ContactError, ContactViewModel

logger = logging.getLogger(__name__)


def present(contact: Contact) -> ContactViewModel:
    """Format one contact as "{street} - {city}, {state}". Country is never rendered."""
    return ContactViewModel(full_address=f"{contact.street} - {contact.city}, {contact.state}")


class ContactsViewModelPresenter:
    """Does not keep its binder alive: once the UI is gone, notifications are dropped."""

    def __init__(self) -> None:
        self._binder_ref: weakref.ReferenceType | None = None

    @property
    def binder(self) -> ContactsListBindable | None:
        if self._binder_ref is None:
            return None
        return self._binder_ref()

    @binder.setter
    def binder(self, binder: ContactsListBindable | None) -> None:
        self._binder_ref = weakref.ref(binder) if binder is not None else None

    def finded(self, contacts: list[Contact]) -> None:
        view_models = [present(contact) for contact in contacts]
        binder = self.binder
        if binder is None:
            logger.debug("No binder attached; dropping %d view models.", len(view_models))
            return
        binder.bind(view_models)

    def failed(self, error: ContactError) -> None:
        # No error UI yet; the list keeps whatever it showed last.
        logger.warning("Could not fetch contacts: %s", error.name)
