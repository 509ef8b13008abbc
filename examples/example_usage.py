"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the claim workflow lives in the services.
"""

import importlib
import sys

from config import get_settings_module

from src.claims_system.claims_system.common.formatting import format_currency
from src.claims_system.claims_system.container import build_container
from src.claims_system.claims_system.core.enums import Role
from src.claims_system.claims_system.documents.files import LocalFile


def main(paths):
    settings = importlib.import_module(get_settings_module())
    container = build_container(app_config={k: getattr(settings, k) for k in dir(settings) if k.isupper()})

    login = container.auth_service.login("Alice", "Johnson", "1234", Role.LECTURER)
    session = container.sessions.create()
    session.sign_in(login.identity, draft=container.claim_service.new_draft(login.identity))

    container.claim_service.update_draft(session.draft, period="Oct 2025", hours_worked="12", notes="Extra tutorials")
    attached = container.document_service.attach(session.draft, [LocalFile.from_path(p) for p in paths])
    for n in attached.notifications():
        print(f"[{n.severity.value}] {n.title}: {n.message}")

    result = container.claim_service.submit(session.draft, claimant=session.claimant)
    session.draft = result.next_draft
    print(result.notification.message)

    container.claim_service.approve(result.claim.claim_id)
    for claim in container.claim_service.list_history(claimant_id=session.claimant.claimant_id):
        print(claim.claim_id, claim.period, format_currency(claim.total_amount), claim.status.value)


if __name__ == "__main__":
    main(sys.argv[1:] or [__file__])
