from __future__ import annotations

from typing import Iterable, Iterator

from bs4 import Tag
from pydantic import BaseModel, ConfigDict, Field, field_validator

from teammention.identity import Team

DEFAULT_IGNORE_PARENTS: tuple[str, ...] = ("pre", "code", "a")


class FilterContext(BaseModel):
    """Options for one filter configuration.

    base_url is accepted for link-rendering filters; the default span renderer
    does not use it.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default="/", description="Base URL for team profile links.")
    render_links: bool = Field(
        default=False,
        description="Render resolved mentions as links instead of styled spans.",
    )
    ignore_parents: tuple[str, ...] = Field(
        default=DEFAULT_IGNORE_PARENTS,
        description="Element names whose descendants are never rewritten.",
    )

    @field_validator("base_url")
    @classmethod
    def base_url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_url must not be blank")
        return value

    @field_validator("ignore_parents")
    @classmethod
    def normalize_ignore_parents(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(name.lower() for name in value)


class MentionedTeams:
    """Teams resolved during one filter run, in first-mention order.

    Teams are keyed by team_id, so a team mentioned several times (or with
    different casing) appears once.
    """

    def __init__(self, teams: Iterable[Team] = ()) -> None:
        self._teams: dict[str, Team] = {}
        for team in teams:
            self.add(team)

    def add(self, team: Team) -> bool:
        """Record a resolved team. Returns False if it was already recorded."""
        if team.team_id in self._teams:
            return False
        self._teams[team.team_id] = team
        return True

    def as_tuple(self) -> tuple[Team, ...]:
        return tuple(self._teams.values())

    def __contains__(self, team: object) -> bool:
        return isinstance(team, Team) and team.team_id in self._teams

    def __iter__(self) -> Iterator[Team]:
        return iter(list(self._teams.values()))

    def __len__(self) -> int:
        return len(self._teams)

    def __repr__(self) -> str:
        return f"MentionedTeams({[team.handle for team in self._teams.values()]!r})"


class FilterResult(BaseModel):
    """Result of running one filter over a document.

    The document is the same object that was passed in, mutated in place.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    document: Tag
    mentioned_teams: tuple[Team, ...] = ()
    nodes_replaced: int = 0
