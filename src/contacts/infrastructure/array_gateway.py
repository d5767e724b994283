"""In-memory ContactsGateway: a fixed list, answered synchronously. Default wiring with no real source."""

from contacts.application.ports import ContactsCompletionHandler
from contacts.application.result import Success
from contacts.domain import Contact

DEFAULT_CONTACTS = (
    Contact(street="Rua da Vala, 666", city="São Paulo", state="SP", country="BR"),
)


class ContactsArrayGateway:
    """Always succeeds with the same contacts, in order."""

    def __init__(self, contacts: list[Contact] | tuple[Contact, ...] = DEFAULT_CONTACTS) -> None:
        self._contacts = tuple(contacts)

    def all(self, completion_handler: ContactsCompletionHandler) -> None:
        completion_handler(Success(list(self._contacts)))
