from __future__ import annotations

import base64
import uuid


def _encode(value: uuid.UUID) -> str:
    return base64.urlsafe_b64encode(value.bytes)[:-2].decode("ascii")


#: Identifier carried by the canonical empty path (all-zero UUID).
EMPTY_RUN_ID = _encode(uuid.UUID(int=0))


def new_run_id() -> str:
    """Return a 22-character URL-safe Base64-encoded UUID without padding.

    Each search result and each concatenation receives a fresh identifier
    from here. The identifier is bookkeeping only and never participates in
    path equality.

    Returns:
        A 22-character URL-safe Base64 representation of a UUID4 without
        padding.
    """
    return _encode(uuid.uuid4())
