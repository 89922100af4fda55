"""Shared behaviour for audited, identity-compared domain entities."""

from app.domain.exceptions import ValidationError

ACTOR_MAX_LENGTH = 100


def require_text(entity_type: str, field: str, value: str | None, max_length: int) -> str:
    """Return ``value`` if it is non-blank and within ``max_length``."""
    if value is None or not value.strip():
        raise ValidationError(entity_type, field, "must not be empty")
    if len(value) > max_length:
        raise ValidationError(
            entity_type, field, f"must be at most {max_length} characters (got {len(value)})"
        )
    return value


def optional_text(entity_type: str, field: str, value: str | None, max_length: int) -> str | None:
    """Like ``require_text`` but ``None`` is accepted."""
    if value is None:
        return None
    if len(value) > max_length:
        raise ValidationError(
            entity_type, field, f"must be at most {max_length} characters (got {len(value)})"
        )
    return value


def require_actor(actor: str | None) -> str:
    """Validate an actor identity before it is stamped onto a record."""
    return require_text("Audit", "actor", actor, ACTOR_MAX_LENGTH)


class AuditedEntity:
    """Mixin for dataclass entities with a store-assigned ``id``.

    Equality is identity-based: two entities are equal only when both are
    persisted and share the same ``id``. A transient entity equals only itself.
    """

    id: int | None
    _dirty: bool

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def is_dirty(self) -> bool:
        """True when a mutator changed the entity since it was last saved."""
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        if self.id is None or other.id is None:  # type: ignore[attr-defined]
            return False
        return self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        # Changes once the store assigns an id, like any id-based hash.
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, self.id))
