"""
Render the valid contacts list to stdout.
Run: python -m contacts (from repo root, with .env or env vars set).
"""
import logging

from contacts.composition import RootComponent
from contacts.config import Settings, load_env

logger = logging.getLogger(__name__)


def main() -> None:
    load_env()
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )
    logger.info("Loading contacts from %s source", settings.contacts_source)
    screen = RootComponent(settings).root_screen
    screen.view_did_load()
    print(screen.render())


if __name__ == "__main__":
    main()
