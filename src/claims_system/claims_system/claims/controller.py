from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError
from ..core.notifications import Notification
from ..documents.files import UploadedFile
from ..navigation.web import notify, role_required


def register(app: Flask, container: Container) -> None:
    lecturer_required = role_required(container.sessions, Role.LECTURER)
    admin_required = role_required(container.sessions, Role.ADMIN)

    def _ensure_draft(s):
        if s.draft is None:
            s.draft = container.claim_service.new_draft(s.claimant)
        return s.draft

    def _read_draft_form(s):
        return container.claim_service.update_draft(
            _ensure_draft(s),
            period=request.form.get("period", ""),
            hours_worked=request.form.get("hours_worked", ""),
            notes=request.form.get("notes", ""),
        )

    @app.route("/claims/draft", methods=["POST"], endpoint="save_draft")
    @lecturer_required
    def save_draft(s):
        try:
            _read_draft_form(s)
        except DomainError as e:
            notify(Notification.from_error(e))
        return redirect(url_for("index"))

    def _selected_uploads():
        allowed = app.config["ALLOWED_EXTENSIONS"]
        candidates = []
        for storage in request.files.getlist("documents"):
            if not storage or not storage.filename:
                continue
            upload = UploadedFile(storage, app.config["UPLOAD_FOLDER"])
            if upload.extension not in allowed:
                flash(f"File '{upload.name}' is not a supported document type and was not added.", "warning")
                continue
            candidates.append(upload)
        return candidates

    def _attach_uploads(draft, candidates):
        """Attach and store the selected files; drop references whose file was not stored."""
        result = container.document_service.attach(draft, candidates)
        by_path = {c.path: c for c in candidates}
        saved = []
        try:
            for doc in result.accepted:
                try:
                    by_path[doc.file_path].save()
                except OSError as e:
                    app.logger.exception("Could not store %s", doc.file_name)
                    notify(Notification.system_error(f"An error occurred during document upload: {e}"))
                    continue
                saved.append(doc)
        finally:
            for doc in result.accepted:
                if doc not in saved:
                    draft.documents.remove(doc)
            result.accepted = saved
            result.document_count = draft.document_count
        for n in result.notifications():
            notify(n)
        return result

    @app.route("/claims/documents", methods=["POST"], endpoint="upload_documents")
    @lecturer_required
    def upload_documents(s):
        try:
            draft = _read_draft_form(s)
        except DomainError as e:
            notify(Notification.from_error(e))
            return redirect(url_for("index"))

        candidates = _selected_uploads()
        if not candidates:
            return redirect(url_for("index"))

        try:
            _attach_uploads(draft, candidates)
        except Exception as e:
            app.logger.exception("Document upload failed")
            notify(Notification.system_error(f"An error occurred during document upload: {e}"))

        return redirect(url_for("index"))

    @app.route("/claims/submit", methods=["POST"], endpoint="submit_claim")
    @lecturer_required
    def submit_claim(s):
        try:
            draft = _read_draft_form(s)
            candidates = _selected_uploads()
            if candidates:
                _attach_uploads(draft, candidates)
            result = container.claim_service.submit(draft, claimant=s.claimant)
            s.draft = result.next_draft
            notify(result.notification)
        except DomainError as e:
            notify(Notification.from_error(e))
        except Exception:
            app.logger.exception("Claim submission failed")
            notify(Notification.system_error("System error while submitting the claim"))
        return redirect(url_for("index"))

    def _decide(claim_id: int, action):
        try:
            result = action(int(claim_id))
            if result:
                notify(result.notification)
            else:
                flash(f"Claim {claim_id} is not awaiting a decision.", "info")
        except DomainError as e:
            notify(Notification.from_error(e))
        except Exception:
            app.logger.exception("Decision on claim %s failed", claim_id)
            notify(Notification.system_error("System error while updating the claim"))
        return redirect(url_for("index"))

    @app.route("/admin/claims/<int:claim_id>/approve", methods=["POST"], endpoint="approve_claim")
    @admin_required
    def approve_claim(s, claim_id: int):
        return _decide(claim_id, container.claim_service.approve)

    @app.route("/admin/claims/<int:claim_id>/reject", methods=["POST"], endpoint="reject_claim")
    @admin_required
    def reject_claim(s, claim_id: int):
        return _decide(claim_id, container.claim_service.reject)
