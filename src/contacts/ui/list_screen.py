"""Text list screen: the Binder at the edge of the pipeline."""

from contacts.application.ports import ContactsPresenter, ValidContactsInteractable
from contacts.domain import ContactViewModel

EMPTY_MESSAGE = "No contacts to show."


class ContactsListScreen:
    """Shows one row per view model. Registers itself as the presenter's (weak) binder."""

    def __init__(
        self, interactor: ValidContactsInteractable, presenter: ContactsPresenter
    ) -> None:
        self._interactor = interactor
        self._view_models: list[ContactViewModel] = []
        presenter.binder = self

    def start_fetch(self) -> None:
        """Ask the use case for contacts. Rows arrive later through bind()."""
        self._interactor.all()

    # Lifecycle hook name used by the hosting UI once the screen is ready.
    view_did_load = start_fetch

    def bind(self, view_models: list[ContactViewModel]) -> None:
        self._view_models = list(view_models)

    def number_of_rows(self) -> int:
        return len(self._view_models)

    def row(self, index: int) -> str:
        return self._view_models[index].full_address

    def render(self) -> str:
        if not self._view_models:
            return EMPTY_MESSAGE
        return "\n".join(view_model.full_address for view_model in self._view_models)
