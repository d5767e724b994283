"""Tests for factory wiring and the scoped components."""

from contacts.application import ValidContactsInteractor
from contacts.config import SOURCE_FILE, Settings
from contacts.composition import (
    ContactsListComponent,
    RootComponent,
    make_contacts_gateway,
    make_contacts_list_screen,
    make_contacts_presenter,
    make_valid_contacts_interactor,
)
from contacts.infrastructure import (
    ContactsArrayGateway,
    ContactsFileGateway,
    ContactsViewModelPresenter,
)


def test_default_gateway_is_array_gateway() -> None:
    assert isinstance(make_contacts_gateway(), ContactsArrayGateway)


def test_file_source_builds_file_gateway(tmp_path) -> None:
    settings = Settings(contacts_source=SOURCE_FILE, contacts_file=tmp_path / "c.yaml")
    gateway = make_contacts_gateway(settings)
    assert isinstance(gateway, ContactsFileGateway)
    assert gateway.path == tmp_path / "c.yaml"


def test_factories_build_interactor_with_given_presenter() -> None:
    presenter = make_contacts_presenter()
    assert isinstance(presenter, ContactsViewModelPresenter)
    interactor = make_valid_contacts_interactor(presenter)
    assert isinstance(interactor, ValidContactsInteractor)


def test_factory_screen_shows_default_contact() -> None:
    screen = make_contacts_list_screen()
    screen.start_fetch()
    assert screen.render() == "Rua da Vala, 666 - São Paulo, SP"


def test_list_component_shares_presenter_within_its_lifetime() -> None:
    component = ContactsListComponent(parent=RootComponent())
    assert component.presenter is component.presenter
    screen = component.screen
    assert component.presenter.binder is screen


def test_separate_list_components_get_separate_presenters() -> None:
    root = RootComponent()
    assert root.contacts_list_component.presenter is not root.contacts_list_component.presenter


def test_root_gateway_is_fresh_per_access() -> None:
    root = RootComponent()
    assert root.contacts_gateway is not root.contacts_gateway


def test_root_screen_end_to_end_with_file_source(tmp_path) -> None:
    path = tmp_path / "contacts.yaml"
    path.write_text(
        "contacts:\n"
        "  - {street: 1 A St, city: X, state: XX, country: US}\n"
        "  - {street: 2 B St, city: Y, state: YY}\n",
        encoding="utf-8",
    )
    screen = RootComponent(Settings(contacts_source=SOURCE_FILE, contacts_file=path)).root_screen
    screen.view_did_load()
    assert screen.render() == "1 A St - X, XX"
