"""In-memory identity store for testing and development.

Keeps organizations and teams in dictionaries keyed by lowercased login and
team name. Suitable for unit tests, demos and small fixed directories.

**Not recommended for production**: no persistence, no concurrency control,
and every organization and team must fit in memory.
"""

from teammention.identity import Organization, Team
from teammention.storage.interfaces import IdentityStoreInterface


class InMemoryIdentityStore(IdentityStoreInterface):
    """Dictionary-backed identity store.

    Example:
        ```python
        store = InMemoryIdentityStore()
        acme = store.add_organization(Organization(organization_id="1", login="acme"))
        store.add_team(Team(team_id="10", organization=acme, name="frontend"))
        store.find_team_by_name(acme, "FRONTEND")  # -> the frontend team
        ```
    """

    def __init__(self) -> None:
        self._organizations: dict[str, Organization] = {}
        # org login (lowercased) -> team name (lowercased) -> team
        self._teams: dict[str, dict[str, Team]] = {}

    def add_organization(self, organization: Organization) -> Organization:
        """Store an organization, replacing any with the same login.

        Returns:
            The stored organization.
        """
        key = organization.login.lower()
        self._organizations[key] = organization
        self._teams.setdefault(key, {})
        return organization

    def add_team(self, team: Team) -> Team:
        """Store a team under its organization, replacing any with the same name.

        Raises:
            ValueError: If the team's organization has not been added.
        """
        org_key = team.organization.login.lower()
        if org_key not in self._organizations:
            raise ValueError(f"Unknown organization for team {team.handle!r}: add the organization first")
        self._teams[org_key][team.name.lower()] = team
        return team

    def find_organization_by_login(self, login: str) -> Organization | None:
        return self._organizations.get(login.lower())

    def find_team_by_name(self, organization: Organization, name: str) -> Team | None:
        teams = self._teams.get(organization.login.lower(), {})
        return teams.get(name.lower())

    def count_teams(self) -> int:
        """Return the total number of stored teams."""
        return sum(len(teams) for teams in self._teams.values())
