"""Environment-driven runtime switches."""

import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def diagnostics_enabled() -> bool:
    """Per-file diagnostics logging (INGEST_DIAG, on by default)."""
    return _flag("INGEST_DIAG", "1")


def house_owner() -> str:
    """Owner name whose rows in an owner mapping are not artist assignments."""
    return os.getenv("INGEST_HOUSE_OWNER", "Comedy Genius").strip()
