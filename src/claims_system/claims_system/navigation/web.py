"""Flask glue shared by the controllers: session lookup and role gates."""

from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, session, url_for

from ..core.enums import Role
from ..core.notifications import Notification
from .session import ClaimsSession, SessionRegistry

SESSION_KEY = "claims_session_id"


def current_session(sessions: SessionRegistry) -> ClaimsSession:
    """The registered session for this browser, or an untracked anonymous one."""
    return sessions.get(session.get(SESSION_KEY)) or sessions.anonymous()


def start_session(sessions: SessionRegistry, s: ClaimsSession) -> None:
    sessions.register(s)
    session[SESSION_KEY] = s.session_id


def notify(notification: Notification) -> None:
    flash(notification.message, notification.category)


def role_required(sessions: SessionRegistry, role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            s = current_session(sessions)
            if s.identity is None:
                flash("Please log in to continue.", "warning")
                return redirect(url_for("index"))
            if s.role != role:
                return render_template("403.html", current_user=s.identity), 403
            return view(s, *args, **kwargs)

        return wrapper

    return decorator
