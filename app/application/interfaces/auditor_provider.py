"""Port supplying the identity recorded in audit fields."""

from abc import ABC, abstractmethod


class AuditorProvider(ABC):
    """Returns the actor responsible for the current mutation.

    This is where an authentication system would plug in; the entity model
    and repositories only ever see the resolved string.
    """

    @abstractmethod
    def current_auditor(self) -> str:
        ...
