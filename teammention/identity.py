"""Identity entities referenced by team mentions.

Organizations and teams are owned by an external identity store. This package
only looks them up; it never creates, updates or persists them.
"""

from pydantic import BaseModel, Field


class Organization(BaseModel, frozen=True):
    """An organization account, keyed by a case-insensitive login."""

    organization_id: str = Field(
        description="Stable identifier assigned by the identity store."
    )
    login: str = Field(
        min_length=1,
        description="Canonical login, e.g. 'acme'. Lookups ignore case.",
    )
    name: str | None = Field(
        default=None,
        description="Display name if the organization has one.",
    )


class Team(BaseModel, frozen=True):
    """A team belonging to exactly one organization.

    Team names are unique within their organization, ignoring case. Two Team
    objects with the same team_id are the same team even if they were loaded
    separately or spelled differently in the source text.
    """

    team_id: str = Field(
        description="Stable identifier assigned by the identity store."
    )
    organization: Organization = Field(
        description="The owning organization."
    )
    name: str = Field(
        min_length=1,
        description="Canonical team name, e.g. 'frontend'.",
    )
    description: str | None = Field(
        default=None,
        description="Free-form team description.",
    )

    @property
    def handle(self) -> str:
        """The canonical `org/team` handle, without the leading '@'."""
        return f"{self.organization.login}/{self.name}"
