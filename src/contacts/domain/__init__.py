"""Domain layer: entities and value objects. No dependencies on outer layers."""

from contacts.domain.entities import Contact, ContactError, ContactViewModel

__all__ = ["Contact", "ContactError", "ContactViewModel"]
