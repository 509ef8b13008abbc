from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..claims.model import Claim, DocumentReference
from ..core.constants import MAX_DOCUMENT_BYTES, MAX_DOCUMENTS_PER_CLAIM
from ..core.enums import ErrorCode
from ..core.notifications import Notification
from .files import CandidateFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectedFile:
    file: CandidateFile
    reason: ErrorCode
    detail: str = ""


@dataclass
class AttachResult:
    accepted: list[DocumentReference] = field(default_factory=list)
    rejected: list[RejectedFile] = field(default_factory=list)
    document_count: int = 0
    max_documents: int = MAX_DOCUMENTS_PER_CLAIM

    def rejected_with(self, reason: ErrorCode) -> list[RejectedFile]:
        return [r for r in self.rejected if r.reason == reason]

    def notifications(self) -> list[Notification]:
        """One notification per problem, then a summary when anything was attached."""
        out: list[Notification] = []
        for r in self.rejected:
            if r.reason == ErrorCode.FILE_TOO_LARGE:
                out.append(
                    Notification.for_code(
                        r.reason,
                        f"File '{r.file.name}' exceeds the 5MB limit and was not added.",
                    )
                )
            elif r.reason == ErrorCode.SYSTEM_ERROR:
                out.append(Notification.system_error(f"An error occurred during document upload: {r.detail}"))

        if self.rejected_with(ErrorCode.LIMIT_REACHED):
            out.append(
                Notification.for_code(
                    ErrorCode.LIMIT_REACHED,
                    f"Maximum of {self.max_documents} documents allowed per claim.",
                )
            )

        if self.accepted:
            out.append(
                Notification.info(
                    "Document Upload Complete",
                    f"{self.document_count} document(s) attached and ready for submission.",
                )
            )
        return out


class DocumentService:
    """Attach supporting documents to a draft claim."""

    def __init__(
        self,
        *,
        max_documents: int = MAX_DOCUMENTS_PER_CLAIM,
        max_bytes: int = MAX_DOCUMENT_BYTES,
    ):
        self._max_documents = int(max_documents)
        self._max_bytes = int(max_bytes)

    def attach(self, draft: Claim, candidates: Iterable[CandidateFile]) -> AttachResult:
        """Attach files in the order given.

        The document limit is checked before every file, so a batch can
        partially succeed. Files that cannot be read are reported, not raised.
        """
        result = AttachResult(max_documents=self._max_documents)

        for candidate in candidates:
            if draft.document_count >= self._max_documents:
                result.rejected.append(RejectedFile(candidate, ErrorCode.LIMIT_REACHED))
                continue

            try:
                size = int(candidate.size)
            except OSError as e:
                logger.warning("Could not read %r: %s", candidate, e)
                result.rejected.append(RejectedFile(candidate, ErrorCode.SYSTEM_ERROR, str(e)))
                continue

            if size > self._max_bytes:
                result.rejected.append(RejectedFile(candidate, ErrorCode.FILE_TOO_LARGE))
                continue

            doc = DocumentReference(file_name=candidate.name, file_path=candidate.path)
            draft.documents.append(doc)
            result.accepted.append(doc)

        result.document_count = draft.document_count
        return result
