from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import Role, View

_VIEW_BY_ROLE = {
    Role.LECTURER: View.LECTURER,
    Role.ADMIN: View.ADMIN,
}


@dataclass
class ViewRouter:
    """Which view the application window is currently showing."""

    current: View = View.LOGIN
    history: list[View] = field(default_factory=list)

    def navigate(self, view: View) -> View:
        view = View(view)
        if view != self.current:
            self.history.append(self.current)
            self.current = view
        return self.current

    def show_role_view(self, role: Role) -> View:
        return self.navigate(_VIEW_BY_ROLE[Role(role)])

    def reset(self) -> View:
        self.history.clear()
        self.current = View.LOGIN
        return self.current
