"""Test fixtures and a small identity directory.

This module provides:
- An in-memory identity store seeded with two organizations and three teams
- A store double that fails every lookup, for error propagation tests
- A counting resolver wrapper for asserting how often resolution happens
- Factory helpers for organizations and teams

Seeded directory:
    acme   -> frontend, Backend-Team
    globex -> ops
"""

import pytest

from teammention.identity import Organization, Team
from teammention.pipeline.interfaces import MentionResolverInterface
from teammention.resolver import TeamMentionResolver
from teammention.storage.interfaces import IdentityStoreError, IdentityStoreInterface
from teammention.storage.memory import InMemoryIdentityStore


def make_organization(login: str, organization_id: str | None = None) -> Organization:
    return Organization(organization_id=organization_id or f"org-{login.lower()}", login=login)


def make_team(organization: Organization, name: str, team_id: str | None = None) -> Team:
    return Team(
        team_id=team_id or f"team-{organization.login.lower()}-{name.lower()}",
        organization=organization,
        name=name,
    )


class UnavailableIdentityStore(IdentityStoreInterface):
    """Identity store whose backend is always down."""

    def find_organization_by_login(self, login: str) -> Organization | None:
        raise IdentityStoreError("identity store unavailable")

    def find_team_by_name(self, organization: Organization, name: str) -> Team | None:
        raise IdentityStoreError("identity store unavailable")


class CountingResolver(MentionResolverInterface):
    """Wraps a resolver and records every (org, team) it is asked about."""

    def __init__(self, inner: MentionResolverInterface) -> None:
        self.inner = inner
        self.calls: list[tuple[str, str]] = []

    def resolve(self, org_login: str, team_name: str) -> Team | None:
        self.calls.append((org_login, team_name))
        return self.inner.resolve(org_login, team_name)


@pytest.fixture
def acme() -> Organization:
    return make_organization("acme")


@pytest.fixture
def globex() -> Organization:
    return make_organization("globex")


@pytest.fixture
def frontend(acme: Organization) -> Team:
    return make_team(acme, "frontend")


@pytest.fixture
def backend(acme: Organization) -> Team:
    return make_team(acme, "Backend-Team")


@pytest.fixture
def ops(globex: Organization) -> Team:
    return make_team(globex, "ops")


@pytest.fixture
def identity_store(
    acme: Organization,
    globex: Organization,
    frontend: Team,
    backend: Team,
    ops: Team,
) -> InMemoryIdentityStore:
    """Provide an in-memory identity store with acme and globex teams."""
    store = InMemoryIdentityStore()
    store.add_organization(acme)
    store.add_organization(globex)
    store.add_team(frontend)
    store.add_team(backend)
    store.add_team(ops)
    return store


@pytest.fixture
def resolver(identity_store: InMemoryIdentityStore) -> TeamMentionResolver:
    return TeamMentionResolver(identity_store)


@pytest.fixture
def counting_resolver(resolver: TeamMentionResolver) -> CountingResolver:
    return CountingResolver(resolver)


@pytest.fixture
def unavailable_store() -> UnavailableIdentityStore:
    return UnavailableIdentityStore()
