"""Public identifier resolution for profiles, listings and conversations.

A public identifier is whatever string shows up in a URL path segment. It is
either a canonical UUID (the entity's primary key) or a short code stored in
the entity's ``short_id`` column. Classification never fails; a value that is
not a well-formed UUID is simply looked up as a short code.
"""

import re
from typing import Any, NamedTuple, Optional, Union
from uuid import UUID

from sqlalchemy import Select

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

SHORT_ID_LENGTH = 12


class PublicIdLookup(NamedTuple):
    """Equality predicate produced by ``classify``."""

    field: str  # 'id' or 'short_id'
    value: str


def is_uuid(value: str) -> bool:
    """Return True if ``value`` is an RFC-4122 shaped UUID literal."""
    return UUID_PATTERN.match(value) is not None


def classify(public_id: str) -> PublicIdLookup:
    """Map a public identifier to the column and value to look it up by."""
    if is_uuid(public_id):
        return PublicIdLookup(field="id", value=public_id.lower())
    return PublicIdLookup(field="short_id", value=public_id)


def derive_short_id(entity_id: Union[UUID, str]) -> str:
    """Fallback short code: the first 12 hex digits of the UUID, lowercased."""
    hex_digits = re.sub(r"[^0-9a-fA-F]", "", str(entity_id))
    return hex_digits.lower()[:SHORT_ID_LENGTH]


def public_id_for(entity_id: Union[UUID, str], short_id: Optional[str]) -> str:
    """Canonical public identifier to expose for an entity."""
    return short_id or derive_short_id(entity_id)


def apply_public_id_filter(query: Select, model_class: Any, public_id: str) -> Select:
    """Add the resolved equality predicate for ``public_id`` to ``query``."""
    lookup = classify(public_id)
    if lookup.field == "id":
        return query.where(model_class.id == UUID(lookup.value))
    return query.where(model_class.short_id == lookup.value)
