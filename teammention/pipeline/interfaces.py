"""Pipeline interface definitions for HTML filters and mention resolution.

A filter pipeline parses an HTML document once and runs a sequence of
filters over the parsed tree. Each filter mutates the tree in place and
reports what it found in a FilterResult.

Typical flow for team mentions:
    1. HTMLPipeline parses the HTML into a BeautifulSoup tree
    2. TeamMentionFilter walks text nodes and substitutes mentions
    3. MentionResolverInterface maps each (org, team) pair to a Team
    4. HTMLPipeline serializes the tree and merges the mentioned teams
"""

from abc import ABC, abstractmethod

from bs4 import Tag

from teammention.context import FilterResult
from teammention.identity import Team


class MentionResolverInterface(ABC):
    """Resolve a mentioned organization login and team name to a Team.

    Resolution is exact (ignoring case): no partial or fuzzy matches. A
    mention that does not resolve is the normal outcome for text that only
    looks like a mention, so implementations return None rather than raise.
    Failures of the backing store are not caught here.
    """

    @abstractmethod
    def resolve(self, org_login: str, team_name: str) -> Team | None:
        """Resolve a single mention.

        Args:
            org_login: Organization login as written in the text.
            team_name: Team name as written in the text.

        Returns:
            The Team, carrying canonical casing for both the organization
            login and the team name, or None if either lookup finds nothing.
        """


class HTMLFilterInterface(ABC):
    """A single stage of an HTML filter pipeline.

    Filters receive the parsed document, may mutate it in place, and return
    a FilterResult. Filters must not keep per-document state between calls;
    anything a run accumulates belongs in the returned result.
    """

    @abstractmethod
    def call(self, document: Tag) -> FilterResult:
        """Run the filter over a parsed document.

        Args:
            document: Root of the parsed document (usually a BeautifulSoup
                object). Mutated in place.

        Returns:
            A FilterResult wrapping the same document and whatever the filter
            collected during this run.
        """
