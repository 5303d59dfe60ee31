"""Item Authorization — the single access predicate for every item operation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Authentication is checked before ownership, ownership before anything else
    - Unauthenticated always → REDIRECT_SIGN_IN
    - NotOwner and NotFound are indistinguishable → REDIRECT_ROOT
    - decide_access returns None when the request may proceed

Design Decisions:
    - One predicate (can_access) shared by all six operations: no per-route guard clauses
    - Outcomes (not exceptions): a rejection is a normal response, so the
      controller handles both paths with the same return shape
    - NotFound folded into REDIRECT_ROOT: non-owners cannot probe which ids exist
"""

from app.core.domain_types import (
    ActorId, ItemAction, AccessOutcome, MEMBER_ACTIONS, MUTATING_ACTIONS,
)


def is_authenticated(actor_id: ActorId | None) -> bool:
    return actor_id is not None


def is_owner(actor_id: ActorId | None, owner_id: ActorId | None) -> bool:
    """True only when both ids are known and equal."""
    return actor_id is not None and owner_id is not None and actor_id == owner_id


def can_access(
    actor_id: ActorId | None,
    owner_id: ActorId | None,
    action: ItemAction,
) -> bool:
    """May this actor perform this action (on the item owned by owner_id)?

    owner_id is ignored for collection actions (list/new/create) and must be
    None when the addressed item does not exist.
    """
    if not is_authenticated(actor_id):
        return False
    if action not in MEMBER_ACTIONS:
        return True
    return is_owner(actor_id, owner_id)


def check_authenticated(actor_id: ActorId | None) -> AccessOutcome | None:
    """Rule 1: every item operation requires a signed-in actor."""
    if not is_authenticated(actor_id):
        return AccessOutcome.REDIRECT_SIGN_IN
    return None


def check_ownership(
    actor_id: ActorId | None,
    owner_id: ActorId | None,
    action: ItemAction,
) -> AccessOutcome | None:
    """Rule 2: member actions require the actor to own the item."""
    if not can_access(actor_id, owner_id, action):
        return AccessOutcome.REDIRECT_ROOT
    return None


def decide_access(
    actor_id: ActorId | None,
    action: ItemAction,
    owner_id: ActorId | None = None,
) -> AccessOutcome | None:
    """Chain all access checks. Returns the rejection outcome or None."""
    return (
        check_authenticated(actor_id)
        or check_ownership(actor_id, owner_id, action)
    )


def success_outcome(action: ItemAction) -> AccessOutcome:
    """Outcome of an allowed action: mutations redirect to root, views render."""
    if action in MUTATING_ACTIONS:
        return AccessOutcome.REDIRECT_ROOT
    return AccessOutcome.SUCCESS
