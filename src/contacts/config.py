"""Settings read from the environment (and a .env file at the repo root or cwd)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SOURCE_ARRAY = "array"
SOURCE_FILE = "file"
SOURCES = (SOURCE_ARRAY, SOURCE_FILE)

DEFAULT_CONTACTS_FILE = "contacts.yaml"


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load the first .env found: repo root, then current dir. Existing env vars win."""
    for path in (_repo_root() / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    contacts_source: str = SOURCE_ARRAY
    contacts_file: Path = Path(DEFAULT_CONTACTS_FILE)
    log_level: str = "INFO"

    def __post_init__(self):
        if self.contacts_source not in SOURCES:
            raise ValueError(
                f"CONTACTS_SOURCE must be one of {', '.join(SOURCES)}, got '{self.contacts_source}'"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        source = os.environ.get("CONTACTS_SOURCE", SOURCE_ARRAY).strip().lower() or SOURCE_ARRAY
        contacts_file = os.environ.get("CONTACTS_FILE", "").strip() or DEFAULT_CONTACTS_FILE
        log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(
            contacts_source=source,
            contacts_file=Path(contacts_file),
            log_level=log_level,
        )
