from __future__ import annotations

from flask import Flask, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import Role, View
from ..core.exceptions import AuthenticationError
from ..core.notifications import Notification
from ..navigation.web import SESSION_KEY, current_session, notify, start_session


def register(app: Flask, container: Container) -> None:
    def _render_view(s):
        if s.view == View.LECTURER and s.claimant:
            claimant = s.claimant
            return render_template(
                "lecturer.html",
                claimant=claimant,
                draft=s.draft,
                claims=container.claim_service.list_history(claimant_id=claimant.claimant_id),
                max_documents=app.config["MAX_DOCUMENTS_PER_CLAIM"],
                allowed_extensions=sorted(app.config["ALLOWED_EXTENSIONS"]),
            )
        if s.view == View.ADMIN and s.role == Role.ADMIN:
            return render_template(
                "admin.html",
                admin=s.identity,
                pending=container.claim_service.list_pending(),
            )
        return render_template("login.html", form={})

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return _render_view(current_session(container.sessions))

    def _login(role: Role):
        s = current_session(container.sessions)
        first_name = request.form.get("first_name", "")
        last_name = request.form.get("last_name", "")
        unique_id = request.form.get("unique_id", "")

        try:
            result = container.auth_service.login(first_name, last_name, unique_id, role)
        except AuthenticationError as e:
            notify(Notification.from_error(e))
            return render_template("login.html", form=request.form)
        except Exception:
            app.logger.exception("Login failed")
            notify(Notification.system_error("System error during login"))
            return render_template("login.html", form=request.form)

        draft = None
        if role == Role.LECTURER:
            draft = container.claim_service.new_draft(result.identity)
        s.sign_in(result.identity, draft=draft)
        start_session(container.sessions, s)
        notify(result.notification)
        return redirect(url_for("index"))

    @app.route("/login/lecturer", methods=["POST"], endpoint="login_lecturer")
    def login_lecturer():
        return _login(Role.LECTURER)

    @app.route("/login/admin", methods=["POST"], endpoint="login_admin")
    def login_admin():
        return _login(Role.ADMIN)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        s = current_session(container.sessions)
        s.sign_out()
        container.sessions.discard(s.session_id)
        session.pop(SESSION_KEY, None)
        notify(Notification.info("Logged out", "You have been logged out."))
        return redirect(url_for("index"))
