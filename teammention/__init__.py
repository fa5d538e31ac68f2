"""
Team Mention Filter - render `@organization/team` mentions in HTML.

Finds `@org/team` tokens in the text nodes of an HTML document, resolves them
against an identity store, and rewrites the resolvable ones as styled markup.
Mentions inside <pre>, <code> and <a> elements, and mentions that do not
resolve, are left untouched.

    from teammention import FilterContext, InMemoryIdentityStore, TeamMentionFilter

    html, teams = TeamMentionFilter(store).filter_html("<p>cc @acme/frontend</p>")
"""

from teammention.config import load_filter_context
from teammention.context import FilterContext, FilterResult, MentionedTeams
from teammention.document import parse_html, render_html
from teammention.filter import TeamMentionFilter
from teammention.identity import Organization, Team
from teammention.matcher import MENTION_PATTERN, MentionToken, find_mentions
from teammention.pipeline import HTMLFilterInterface, HTMLPipeline, MentionResolverInterface, PipelineResult
from teammention.resolver import TeamMentionResolver
from teammention.storage import IdentityStoreError, IdentityStoreInterface, InMemoryIdentityStore
from teammention.substitutor import (
    TEAM_MENTION_CLASS,
    MentionSubstitutor,
    render_team_link,
    render_team_mention,
)
from teammention.walker import has_ignored_ancestor, walk_text_nodes

__all__ = [
    "FilterContext",
    "FilterResult",
    "HTMLFilterInterface",
    "HTMLPipeline",
    "IdentityStoreError",
    "IdentityStoreInterface",
    "InMemoryIdentityStore",
    "MENTION_PATTERN",
    "MentionResolverInterface",
    "MentionSubstitutor",
    "MentionToken",
    "MentionedTeams",
    "Organization",
    "PipelineResult",
    "TEAM_MENTION_CLASS",
    "Team",
    "TeamMentionFilter",
    "TeamMentionResolver",
    "find_mentions",
    "has_ignored_ancestor",
    "load_filter_context",
    "parse_html",
    "render_html",
    "render_team_link",
    "render_team_mention",
    "walk_text_nodes",
]

__version__ = "0.1.0"
