"""Session wiring for metascry.

Example:
    from metascry.app import open_vault

    with open_vault("~/notes") as session:
        session.vault.set_active("Ideas/Garden")
        print(session.scrier.current.matter)
"""

from .factory import create_session, open_vault
from .session import ScrySession

__all__ = ["ScrySession", "create_session", "open_vault"]
