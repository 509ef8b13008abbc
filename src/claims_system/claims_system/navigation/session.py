from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from ..claims.model import Claim
from ..core.enums import Role, View
from ..users.model import Claimant, Identity
from .router import ViewRouter


@dataclass
class ClaimsSession:
    """Everything one logged-in window needs, passed explicitly to operations."""

    session_id: str
    router: ViewRouter = field(default_factory=ViewRouter)
    identity: Optional[Identity] = None
    draft: Optional[Claim] = None

    @property
    def view(self) -> View:
        return self.router.current

    @property
    def role(self) -> Optional[Role]:
        return self.identity.role if self.identity else None

    @property
    def claimant(self) -> Optional[Claimant]:
        return self.identity if isinstance(self.identity, Claimant) else None

    def sign_in(self, identity: Identity, *, draft: Optional[Claim] = None) -> View:
        self.identity = identity
        self.draft = draft
        return self.router.show_role_view(identity.role)

    def sign_out(self) -> View:
        self.identity = None
        self.draft = None
        return self.router.reset()


class SessionRegistry:
    """In-memory map of session id -> ClaimsSession."""

    def __init__(self):
        self._sessions: dict[str, ClaimsSession] = {}

    @staticmethod
    def anonymous() -> ClaimsSession:
        """A session that is not tracked until `register` is called."""
        return ClaimsSession(session_id=uuid.uuid4().hex)

    def register(self, s: ClaimsSession) -> ClaimsSession:
        self._sessions[s.session_id] = s
        return s

    def create(self) -> ClaimsSession:
        return self.register(self.anonymous())

    def get(self, session_id: Optional[str]) -> Optional[ClaimsSession]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def discard(self, session_id: Optional[str]) -> None:
        if session_id:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
