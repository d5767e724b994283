"""Domain entities: Contact, ContactViewModel, and the ContactError taxonomy."""

from dataclasses import dataclass
from enum import Enum


class ContactError(Enum):
    """Closed set of reasons a contact source can fail. Returned, never raised."""

    NOT_ACCESSIBLE = "not_accessible"
    # Any other failure of the source; no more specific cause is defined yet.
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Contact:
    """
    A raw postal address record as received from a contact source.
    A Contact without a country is kept by the source but is not displayable.
    """

    street: str
    city: str
    state: str
    country: str | None = None

    def __post_init__(self):
        for name in ("street", "city", "state"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"Contact {name} must be a string.")
        if self.country is not None and not isinstance(self.country, str):
            raise ValueError("Contact country must be a string or None.")


@dataclass(frozen=True)
class ContactViewModel:
    """Presentation-ready projection of a Contact: a single formatted address line."""

    full_address: str
