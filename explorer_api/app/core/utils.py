"""Identifier and timestamp helpers shared by the services."""

import secrets
from datetime import datetime, timezone

# URL-safe alphabet used by nanoid, so generated ids look the same as
# the ones already stored in existing documents.
ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"


def generate_id(size: int = 21, prefix: str = "") -> str:
    """Return a random opaque identifier of ``size`` symbols after ``prefix``."""
    return prefix + "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def utcnow_iso() -> str:
    """Current UTC time as ISO‑8601 with millisecond precision and ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
