"""Authorization policy for organization-owned resources.

These are plain predicates so they can be tested without any storage or
registry. Callers decide whether an admin identity may override.
"""

from __future__ import annotations

from catalog.domain.model.organization import CallerIdentity


def is_owner(caller: CallerIdentity, owner_id: int | None) -> bool:
    return owner_id is not None and caller.id == owner_id


def may_manage(caller: CallerIdentity, owner_id: int | None, admin_override: bool) -> bool:
    """True when ``caller`` may act on a resource owned by ``owner_id``.

    ``admin_override`` lets an admin identity act regardless of ownership;
    pass ``False`` for operations only the real owner may perform.
    """
    if admin_override and caller.is_admin:
        return True
    return is_owner(caller, owner_id)
