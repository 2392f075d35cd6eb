"""Short Ids — fixed-length random identifiers for recycle records."""

import secrets

from catalog.core.domain_types import RECORD_ID_LENGTH

# URL-safe alphabet (same 64 symbols nanoid uses)
ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"


def generate_short_id(length: int = RECORD_ID_LENGTH) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
