"""ContactsGateway backed by a YAML document on disk. Read-only.

Expected shape (a bare top-level list is accepted too):

    contacts:
      - street: "Rua da Vala, 666"
        city: "São Paulo"
        state: SP
        country: BR
      - street: "Main St, 1"
        city: Springfield
        state: IL          # no country: fetched, later filtered out

Errors never leave the gateway: a missing or unreadable file is reported as
ContactError.NOT_ACCESSIBLE, anything malformed as ContactError.UNKNOWN.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from contacts.application.ports import ContactsCompletionHandler
from contacts.application.result import Failure, Result, Success
from contacts.domain import Contact, ContactError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("street", "city", "state")

_BOOL_TAG = "tag:yaml.org,2002:bool"


class _ContactsLoader(yaml.SafeLoader):
    """SafeLoader without YAML 1.1 booleans, so country codes like NO stay strings."""


_ContactsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _contact_from_record(record: Any) -> Contact:
    if not isinstance(record, dict):
        raise ValueError("Every contact record must be a mapping")
    missing = [name for name in _REQUIRED_FIELDS if name not in record]
    if missing:
        raise ValueError(f"Contact record is missing {', '.join(missing)}")
    return Contact(
        street=record["street"],
        city=record["city"],
        state=record["state"],
        country=record.get("country"),
    )


def parse_contacts(raw: str) -> list[Contact]:
    """Parse a YAML document into contacts, keeping document order. Raises ValueError or yaml.YAMLError."""
    document = yaml.load(raw, Loader=_ContactsLoader)
    if document is None:
        return []
    if isinstance(document, dict):
        if "contacts" not in document:
            raise ValueError("Document must have a 'contacts' list")
        records = document["contacts"]
    else:
        records = document
    if not isinstance(records, list):
        raise ValueError("'contacts' must be a list")
    return [_contact_from_record(record) for record in records]


class ContactsFileGateway:
    """Reads every contact from a YAML file each time all() is called."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Result[list[Contact]]:
        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.warning("Contacts file %s is not accessible: %s", self._path, exc)
            return Failure(ContactError.NOT_ACCESSIBLE)
        try:
            # UnicodeDecodeError is a ValueError.
            contacts = parse_contacts(raw.decode("utf-8"))
        except (yaml.YAMLError, ValueError) as exc:
            logger.warning("Contacts file %s is malformed: %s", self._path, exc)
            return Failure(ContactError.UNKNOWN)
        return Success(contacts)

    def all(self, completion_handler: ContactsCompletionHandler) -> None:
        completion_handler(self._load())
