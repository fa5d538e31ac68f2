"""HTML filter that replaces `@organization/team` mentions with styled markup.

Mentions inside <pre>, <code> and <a> elements are ignored, as are mentions
that do not resolve to an existing organization and team. Resolved mentions
are rendered with the canonical organization login and team name, wrapped in
an element with the 'team-mention' class for styling.

Each call() is one document-processing run: it starts a fresh MentionedTeams
accumulator and returns it, de-duplicated, in the FilterResult. The filter
holds no per-run state and can be reused across documents.

Example usage:
    ```python
    store = InMemoryIdentityStore()
    ...
    mention_filter = TeamMentionFilter(store, FilterContext(base_url="https://example.com"))
    html, teams = mention_filter.filter_html("<p>Thanks @acme/frontend!</p>")
    ```
"""

from functools import partial

from bs4 import Tag

from teammention.context import FilterContext, FilterResult, MentionedTeams
from teammention.document import parse_html, render_html
from teammention.identity import Team
from teammention.logging import setup_logging
from teammention.pipeline.interfaces import HTMLFilterInterface, MentionResolverInterface
from teammention.resolver import TeamMentionResolver
from teammention.storage.interfaces import IdentityStoreInterface
from teammention.substitutor import MentionRenderer, MentionSubstitutor, render_team_link, render_team_mention
from teammention.walker import IGNORE_CLASSES, walk_text_nodes


class TeamMentionFilter(HTMLFilterInterface):
    """Pipeline stage that renders resolvable team mentions."""

    def __init__(
        self,
        resolver: MentionResolverInterface | IdentityStoreInterface,
        context: FilterContext | None = None,
    ) -> None:
        """Initialize the filter.

        Args:
            resolver: A mention resolver, or an identity store to wrap in a
                TeamMentionResolver.
            context: Filter options. Defaults to FilterContext().
        """
        if isinstance(resolver, IdentityStoreInterface):
            resolver = TeamMentionResolver(resolver)
        self.resolver = resolver
        self.context = context if context is not None else FilterContext()
        self.substitutor = MentionSubstitutor(self.resolver, renderer=self._renderer())
        self.logger = setup_logging("teammention.filter")

    def _renderer(self) -> MentionRenderer:
        if self.context.render_links:
            return partial(render_team_link, base_url=self.context.base_url)
        return render_team_mention

    def call(self, document: Tag) -> FilterResult:
        mentioned = MentionedTeams()
        replaced = walk_text_nodes(
            document,
            lambda text: self.substitutor.substitute(text, mentioned),
            ignore_parents=self.context.ignore_parents,
            ignore_classes=IGNORE_CLASSES,
        )
        self.logger.info(
            {
                "message": "Team mention filter finished",
                "nodes_replaced": replaced,
                "mentioned_teams": [team.handle for team in mentioned],
            },
            pprint=True,
        )
        return FilterResult(document=document, mentioned_teams=mentioned.as_tuple(), nodes_replaced=replaced)

    def filter_html(self, html: str) -> tuple[str, tuple[Team, ...]]:
        """Parse, filter and re-serialize an HTML string.

        Returns:
            (filtered_html, mentioned_teams)
        """
        result = self.call(parse_html(html))
        return render_html(result.document), result.mentioned_teams
