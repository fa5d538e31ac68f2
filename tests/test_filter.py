"""End-to-end tests for the team mention filter.

This module verifies:
- Resolvable mentions in text nodes are rendered and reported
- Unresolvable mentions leave the document unchanged
- Mentions inside <pre>, <code> and <a> are never rewritten or reported
- Reported teams are de-duplicated across the whole document
- Each run starts with an empty accumulator
- Re-running the filter over its own output changes nothing
- Context options select link rendering and ignored elements
"""

import logging

import pytest

from teammention.context import FilterContext
from teammention.document import parse_html, render_html
from teammention.filter import TeamMentionFilter
from teammention.identity import Team
from teammention.resolver import TeamMentionResolver
from teammention.storage.interfaces import IdentityStoreError
from teammention.storage.memory import InMemoryIdentityStore

from tests.conftest import CountingResolver, UnavailableIdentityStore

FRONTEND_SPAN = '<span class="team-mention">@acme/frontend</span>'


@pytest.fixture
def mention_filter(identity_store: InMemoryIdentityStore) -> TeamMentionFilter:
    return TeamMentionFilter(identity_store)


class TestTeamMentionFilter:
    """Tests for TeamMentionFilter.call() and filter_html()."""

    def test_renders_resolved_mention(self, mention_filter: TeamMentionFilter, frontend: Team) -> None:
        html, teams = mention_filter.filter_html("<p>Thanks @acme/frontend for the review.</p>")

        assert html == f"<p>Thanks {FRONTEND_SPAN} for the review.</p>"
        assert teams == (frontend,)

    def test_unresolved_mention_is_unchanged(self, mention_filter: TeamMentionFilter) -> None:
        html, teams = mention_filter.filter_html("<p>cc @acme/ghost</p>")

        assert html == "<p>cc @acme/ghost</p>"
        assert teams == ()

    @pytest.mark.parametrize(
        "html",
        [
            "<pre>@acme/frontend</pre>",
            "<p><code>@acme/frontend</code></p>",
            "<p><a href='/somewhere'>@acme/frontend</a></p>",
            "<pre><code><span>@acme/frontend</span></code></pre>",
        ],
    )
    def test_ignored_elements_are_not_rewritten(self, mention_filter: TeamMentionFilter, html: str) -> None:
        document = parse_html(html)
        before = render_html(document)

        result = mention_filter.call(document)

        assert render_html(result.document) == before
        assert result.mentioned_teams == ()
        assert result.nodes_replaced == 0

    def test_only_unignored_mentions_are_reported(
        self, mention_filter: TeamMentionFilter, frontend: Team
    ) -> None:
        html, teams = mention_filter.filter_html("<p>@acme/frontend <code>@globex/ops</code></p>")

        assert html == f"<p>{FRONTEND_SPAN} <code>@globex/ops</code></p>"
        assert teams == (frontend,)

    def test_teams_are_deduplicated_across_nodes(
        self, mention_filter: TeamMentionFilter, frontend: Team, ops: Team
    ) -> None:
        document = parse_html("<p>@acme/frontend</p><ul><li>@ACME/FRONTEND</li><li>@globex/ops</li></ul>")

        result = mention_filter.call(document)

        assert result.mentioned_teams == (frontend, ops)
        assert result.nodes_replaced == 3

    def test_document_is_mutated_in_place(self, mention_filter: TeamMentionFilter) -> None:
        document = parse_html("<p>@acme/frontend</p>")

        result = mention_filter.call(document)

        assert result.document is document
        assert document.find("span", class_="team-mention") is not None

    def test_each_run_starts_empty(self, mention_filter: TeamMentionFilter, ops: Team) -> None:
        mention_filter.filter_html("<p>@acme/frontend</p>")

        _, teams = mention_filter.filter_html("<p>@globex/ops</p>")

        assert teams == (ops,)

    def test_rerun_over_output_is_a_no_op(self, mention_filter: TeamMentionFilter) -> None:
        first_html, _ = mention_filter.filter_html("<p>Thanks @acme/frontend.</p>")

        second_html, teams = mention_filter.filter_html(first_html)

        assert second_html == first_html
        assert teams == ()

    def test_script_and_style_contents_are_untouched(self, mention_filter: TeamMentionFilter) -> None:
        source = (
            '<script>if (a<b) { notify("@acme/frontend"); }</script>'
            "<style>.x::after { content: '@acme/frontend' }</style>"
            "<p>x</p>"
        )

        html, teams = mention_filter.filter_html(source)

        assert html == source
        assert teams == ()

    def test_entities_survive_filtering(self, mention_filter: TeamMentionFilter) -> None:
        html, _ = mention_filter.filter_html("<p>Tom &amp; @acme/frontend &lt;3</p>")

        assert html == f"<p>Tom &amp; {FRONTEND_SPAN} &lt;3</p>"

    def test_accepts_resolver(self, counting_resolver: CountingResolver, frontend: Team) -> None:
        mention_filter = TeamMentionFilter(counting_resolver)

        _, teams = mention_filter.filter_html("<p>@acme/frontend <code>@acme/ops</code></p>")

        assert teams == (frontend,)
        assert counting_resolver.calls == [("acme", "frontend")]

    def test_wraps_store_in_resolver(self, mention_filter: TeamMentionFilter, identity_store) -> None:
        assert isinstance(mention_filter.resolver, TeamMentionResolver)
        assert mention_filter.resolver.store is identity_store

    def test_store_failure_propagates(self, unavailable_store: UnavailableIdentityStore) -> None:
        mention_filter = TeamMentionFilter(unavailable_store)

        with pytest.raises(IdentityStoreError):
            mention_filter.filter_html("<p>@acme/frontend</p>")

    def test_logs_run_summary(self, mention_filter: TeamMentionFilter, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="teammention.filter")

        mention_filter.filter_html("<p>@acme/frontend</p>")

        assert "nodes_replaced" in caplog.text
        assert "acme/frontend" in caplog.text


class TestFilterContextOptions:
    """FilterContext options change rendering and exclusions."""

    def test_link_rendering(self, identity_store: InMemoryIdentityStore) -> None:
        context = FilterContext(base_url="https://example.com/", render_links=True)
        mention_filter = TeamMentionFilter(identity_store, context)

        document = mention_filter.call(parse_html("<p>cc @globex/ops</p>")).document
        link = document.find("a")

        assert link["href"] == "https://example.com/orgs/globex/teams/ops"
        assert link["class"] == ["team-mention"]
        assert link.get_text() == "@globex/ops"

    def test_rendered_links_are_not_rewritten_again(self, identity_store: InMemoryIdentityStore) -> None:
        mention_filter = TeamMentionFilter(identity_store, FilterContext(render_links=True))

        first_html, _ = mention_filter.filter_html("<p>cc @globex/ops</p>")
        second_html, teams = mention_filter.filter_html(first_html)

        assert second_html == first_html
        assert teams == ()

    def test_custom_ignore_parents(self, identity_store: InMemoryIdentityStore, frontend: Team) -> None:
        context = FilterContext(ignore_parents=("kbd",))
        mention_filter = TeamMentionFilter(identity_store, context)

        html, teams = mention_filter.filter_html("<kbd>@acme/frontend</kbd><code>@acme/frontend</code>")

        assert html == f"<kbd>@acme/frontend</kbd><code>{FRONTEND_SPAN}</code>"
        assert teams == (frontend,)


def test_public_api_exports_filter():
    import teammention

    assert teammention.TeamMentionFilter is TeamMentionFilter
    assert "find_mentions" in teammention.__all__
