"""Replace resolvable mentions in a text blob with rendered markup.

Substitution runs in two phases. The matcher first produces every token in
the text, each token is then mapped to its resolution, and finally the text
is reassembled with resolved tokens swapped for their rendered fragment.
Unresolved tokens and everything between tokens are copied through verbatim.
"""

from html import escape
from typing import Callable

from teammention.context import MentionedTeams
from teammention.identity import Team
from teammention.matcher import MentionToken, find_mentions
from teammention.pipeline.interfaces import MentionResolverInterface

TEAM_MENTION_CLASS = "team-mention"

MentionRenderer = Callable[[Team], str]


def render_team_mention(team: Team) -> str:
    """Render a resolved team as a styled span using canonical casing."""
    return f"<span class='{TEAM_MENTION_CLASS}'>@{escape(team.organization.login)}/{escape(team.name)}</span>"


def render_team_link(team: Team, base_url: str = "/") -> str:
    """Render a resolved team as a link to its team page under base_url."""
    href = f"{base_url.rstrip('/')}/orgs/{team.organization.login}/teams/{team.name}"
    return (
        f"<a href='{escape(href)}' class='{TEAM_MENTION_CLASS}'>"
        f"@{escape(team.organization.login)}/{escape(team.name)}</a>"
    )


class MentionSubstitutor:
    """Substitute resolvable mentions in serialized text.

    The substitutor holds no per-run state. Resolved teams are recorded in the
    MentionedTeams passed to substitute(), which the caller owns.
    """

    def __init__(
        self,
        resolver: MentionResolverInterface,
        renderer: MentionRenderer = render_team_mention,
    ) -> None:
        self._resolver = resolver
        self._renderer = renderer

    def resolve_tokens(self, text: str) -> list[tuple[MentionToken, Team | None]]:
        """Pair every mention token in the text with its resolution."""
        return [(token, self._resolver.resolve(token.org_name, token.team_name)) for token in find_mentions(text)]

    def substitute(self, text: str, mentioned: MentionedTeams) -> str:
        """Return `text` with every resolvable mention rendered.

        Args:
            text: Serialized text content (already HTML-escaped).
            mentioned: Accumulator that receives each resolved team.

        Returns:
            The reassembled text. Identical to the input if nothing resolved.
        """
        if "@" not in text:
            return text

        pieces: list[str] = []
        cursor = 0
        for token, team in self.resolve_tokens(text):
            if team is None:
                continue
            mentioned.add(team)
            pieces.append(text[cursor : token.start_offset])
            pieces.append(self._renderer(team))
            cursor = token.end_offset

        if not pieces:
            return text
        pieces.append(text[cursor:])
        return "".join(pieces)
