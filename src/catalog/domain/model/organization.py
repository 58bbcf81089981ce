"""Organization snapshot and caller identity.

Neither is owned by the catalog: organizations live in an external
registry and identities are issued by the authentication service. The
catalog only ever sees read-only snapshots of them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Organization:
    """State of an organization at lookup time."""

    id: int
    owner_id: int
    is_frozen: bool = False
    is_deleted: bool = False


@dataclass(frozen=True)
class CallerIdentity:
    """An already-verified identity claim supplied by the boundary."""

    id: int
    username: str
    is_admin: bool = False
