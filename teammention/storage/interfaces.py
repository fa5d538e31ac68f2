"""Storage interface definitions for the identity store."""

from abc import ABC, abstractmethod

from teammention.identity import Organization, Team


class IdentityStoreError(Exception):
    """Raised by store implementations when the backing store is unavailable.

    Mention resolution never catches this; it propagates to whoever runs the
    filter.
    """


class IdentityStoreInterface(ABC):
    """Lookup capability over organizations and their teams.

    Both lookups are exact matches that ignore case. Returning None means
    "not found" and is never an error. Infrastructure failures should raise
    IdentityStoreError (or any other exception) instead.
    """

    @abstractmethod
    def find_organization_by_login(self, login: str) -> Organization | None:
        """Return the organization with this login, or None."""

    @abstractmethod
    def find_team_by_name(self, organization: Organization, name: str) -> Team | None:
        """Return the team with this name inside the organization, or None."""
