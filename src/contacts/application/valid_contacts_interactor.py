"""Valid contacts use case: fetch all, keep the ones with a country, hand them to the presenter."""

import logging
import weakref

from contacts.application.ports import ContactsGateway, ContactsPresenter
from contacts.application.result import Result
from contacts.domain import Contact, ContactError

logger = logging.getLogger(__name__)


def filter_valid_contacts(contacts: list[Contact]) -> list[Contact]:
    """Return the contacts whose country is set, in their original order."""
    return [contact for contact in contacts if contact.country is not None]


class ValidContactsInteractor:
    """Fire-and-forget: results surface through the presenter, never as a return value.

    The gateway callback holds the interactor weakly, so an interactor discarded
    before the gateway answers simply drops the answer.
    """

    def __init__(self, gateway: ContactsGateway, presenter: ContactsPresenter) -> None:
        self._gateway = gateway
        self._presenter = presenter

    def all(self) -> None:
        self_ref = weakref.ref(self)

        def completion_handler(result: Result[list[Contact]]) -> None:
            interactor = self_ref()
            if interactor is None:
                logger.debug("Interactor released before contacts arrived; dropping result.")
                return
            interactor._handle(result)

        self._gateway.all(completion_handler)

    def _handle(self, result: Result[list[Contact]]) -> None:
        result.on_failure(self._failed)
        result.on_success(self._finded)

    def _failed(self, error: ContactError) -> None:
        logger.debug("Fetching contacts failed: %s", error.name)
        self._presenter.failed(error)

    def _finded(self, all_contacts: list[Contact]) -> None:
        valid_contacts = filter_valid_contacts(all_contacts)
        logger.debug(
            "Fetched %d contacts, %d with a country.", len(all_contacts), len(valid_contacts)
        )
        self._presenter.finded(valid_contacts)
