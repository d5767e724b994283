"""Scoped dependency graph.

RootComponent owns process-wide configuration and hands out gateways.
ContactsListComponent lives as long as one list screen: its presenter is
created once and shared by the interactor and the screen it builds.
"""

from functools import cached_property

from contacts.application import ContactsGateway, ContactsPresenter, ValidContactsInteractor
from contacts.composition.factories import make_contacts_gateway
from contacts.config import Settings
from contacts.infrastructure import ContactsViewModelPresenter
from contacts.ui import ContactsListScreen


class RootComponent:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    @property
    def contacts_gateway(self) -> ContactsGateway:
        return make_contacts_gateway(self.settings)

    @property
    def contacts_list_component(self) -> "ContactsListComponent":
        return ContactsListComponent(parent=self)

    @property
    def root_screen(self) -> ContactsListScreen:
        return self.contacts_list_component.screen


class ContactsListComponent:
    def __init__(self, parent: RootComponent) -> None:
        self._parent = parent

    @cached_property
    def presenter(self) -> ContactsPresenter:
        return ContactsViewModelPresenter()

    @property
    def interactor(self) -> ValidContactsInteractor:
        return ValidContactsInteractor(gateway=self._parent.contacts_gateway, presenter=self.presenter)

    @property
    def screen(self) -> ContactsListScreen:
        return ContactsListScreen(interactor=self.interactor, presenter=self.presenter)
