"""AuditorProvider that always answers with one configured identity."""

from app.application.interfaces import AuditorProvider
from app.domain.entities.auditable import require_actor


class StaticAuditorProvider(AuditorProvider):
    """Stub provider used until real authentication exists."""

    def __init__(self, auditor_name: str):
        self._auditor_name = require_actor(auditor_name)

    def current_auditor(self) -> str:
        return self._auditor_name
