"""Resolve mentioned `org/team` pairs against an identity store."""

import logging

from teammention.identity import Team
from teammention.pipeline.interfaces import MentionResolverInterface
from teammention.storage.interfaces import IdentityStoreInterface

logger = logging.getLogger(__name__)


class TeamMentionResolver(MentionResolverInterface):
    """Resolve mentions with two lookups: organization by login, then team by name.

    Both lookups are delegated to the injected store. Store exceptions
    propagate unchanged; this class does no retrying or recovery.
    """

    def __init__(self, store: IdentityStoreInterface) -> None:
        self._store = store

    @property
    def store(self) -> IdentityStoreInterface:
        return self._store

    def resolve(self, org_login: str, team_name: str) -> Team | None:
        organization = self._store.find_organization_by_login(org_login)
        if organization is None:
            logger.debug("Unresolved mention @%s/%s: no such organization", org_login, team_name)
            return None
        team = self._store.find_team_by_name(organization, team_name)
        if team is None:
            logger.debug("Unresolved mention @%s/%s: no such team in %s", org_login, team_name, organization.login)
            return None
        return team
