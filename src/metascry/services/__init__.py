"""Service layer for metascry.

Example usage:

    from metascry import open_vault

    with open_vault("~/notes") as session:
        meta = session.scrier.get("Ideas/Garden.md")
        grouped = group_by(session.scrier.get(["a.md", "b.md"]).values(), "status")
"""

from .current import CurrentDocument
from .dispatch import ScryResult, dispatch, dispatch_async
from .scrier import Scrier

__all__ = [
    "CurrentDocument",
    "Scrier",
    "ScryResult",
    "dispatch",
    "dispatch_async",
]
