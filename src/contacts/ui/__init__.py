"""User interface: screens that bind contact view models."""

from contacts.ui.list_screen import EMPTY_MESSAGE, ContactsListScreen

__all__ = ["EMPTY_MESSAGE", "ContactsListScreen"]
