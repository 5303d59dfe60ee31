"""Item Authorization — tests for the pure access predicate and decision chain.

Tests cover:
    - can_access: anonymous never, collection actions for any actor, member actions only for owner
    - decide_access: authentication checked before ownership
    - missing owner (unknown item) treated like a foreign owner
    - success_outcome: views render, mutations redirect to root
"""

from uuid import uuid4

import pytest

from app.core.domain_types import ActorId, ItemAction, AccessOutcome
from app.core.authorize_item import (
    can_access,
    check_authenticated,
    check_ownership,
    decide_access,
    is_owner,
    success_outcome,
)

ALICE = ActorId(uuid4())
MALLORY = ActorId(uuid4())

COLLECTION = [ItemAction.LIST, ItemAction.NEW, ItemAction.CREATE]
MEMBER = [ItemAction.EDIT, ItemAction.UPDATE, ItemAction.DELETE]


# ─── can_access ──────────────────────────────────────────────────

@pytest.mark.parametrize("action", list(ItemAction))
def test_anonymous_can_never_access(action):
    assert not can_access(None, ALICE, action)
    assert not can_access(None, None, action)


@pytest.mark.parametrize("action", COLLECTION)
def test_any_actor_can_use_collection_actions(action):
    assert can_access(ALICE, None, action)
    assert can_access(MALLORY, None, action)


@pytest.mark.parametrize("action", MEMBER)
def test_owner_can_use_member_actions(action):
    assert can_access(ALICE, ALICE, action)


@pytest.mark.parametrize("action", MEMBER)
def test_non_owner_cannot_use_member_actions(action):
    assert not can_access(MALLORY, ALICE, action)


@pytest.mark.parametrize("action", MEMBER)
def test_unknown_item_denies_member_actions(action):
    assert not can_access(ALICE, None, action)


def test_is_owner_requires_both_ids():
    assert is_owner(ALICE, ALICE)
    assert not is_owner(None, None)
    assert not is_owner(ALICE, None)
    assert not is_owner(ALICE, MALLORY)


# ─── individual checks ───────────────────────────────────────────

def test_check_authenticated():
    assert check_authenticated(None) == AccessOutcome.REDIRECT_SIGN_IN
    assert check_authenticated(ALICE) is None


def test_check_ownership_redirects_to_root():
    assert check_ownership(MALLORY, ALICE, ItemAction.UPDATE) == AccessOutcome.REDIRECT_ROOT
    assert check_ownership(ALICE, ALICE, ItemAction.UPDATE) is None


# ─── decide_access ───────────────────────────────────────────────

@pytest.mark.parametrize("action", list(ItemAction))
def test_unauthenticated_always_goes_to_sign_in(action):
    # even when the "owner" is also None, authentication wins
    assert decide_access(None, action, None) == AccessOutcome.REDIRECT_SIGN_IN
    assert decide_access(None, action, ALICE) == AccessOutcome.REDIRECT_SIGN_IN


@pytest.mark.parametrize("action", MEMBER)
def test_not_owner_goes_to_root(action):
    assert decide_access(MALLORY, action, ALICE) == AccessOutcome.REDIRECT_ROOT


@pytest.mark.parametrize("action", MEMBER)
def test_not_found_goes_to_root(action):
    assert decide_access(ALICE, action, None) == AccessOutcome.REDIRECT_ROOT


@pytest.mark.parametrize("action", list(ItemAction))
def test_owner_proceeds(action):
    assert decide_access(ALICE, action, ALICE) is None


@pytest.mark.parametrize("action", COLLECTION)
def test_collection_actions_ignore_owner(action):
    assert decide_access(ALICE, action) is None


# ─── success_outcome ─────────────────────────────────────────────

@pytest.mark.parametrize("action", [ItemAction.LIST, ItemAction.NEW, ItemAction.EDIT])
def test_views_succeed(action):
    assert success_outcome(action) == AccessOutcome.SUCCESS


@pytest.mark.parametrize("action", [ItemAction.CREATE, ItemAction.UPDATE, ItemAction.DELETE])
def test_mutations_redirect_to_root(action):
    assert success_outcome(action) == AccessOutcome.REDIRECT_ROOT
