"""Run a sequence of HTML filters over one parsed document."""

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from teammention.context import MentionedTeams
from teammention.document import parse_html, render_html
from teammention.identity import Team
from teammention.logging import setup_logging
from teammention.pipeline.interfaces import HTMLFilterInterface


class PipelineResult(BaseModel):
    """Result of running a filter pipeline over one HTML document.

    Attributes:
        html: The serialized document after every filter ran.
        mentioned_teams: Teams mentioned across all filters, de-duplicated,
            in first-mention order.
        nodes_replaced: Total text nodes replaced across all filters.
    """

    model_config = ConfigDict(frozen=True)

    html: str
    mentioned_teams: tuple[Team, ...] = ()
    nodes_replaced: int = 0


class HTMLPipeline:
    """Parse HTML once, run each filter in order, serialize the result.

    Filter exceptions are not caught: a failing filter (for example one whose
    identity store is unavailable) aborts the run.
    """

    def __init__(self, filters: Sequence[HTMLFilterInterface]) -> None:
        if not filters:
            raise ValueError("HTMLPipeline requires at least one filter")
        self.filters = tuple(filters)
        self.logger = setup_logging("teammention.pipeline")

    def run(self, html: str) -> PipelineResult:
        document = parse_html(html)
        mentioned = MentionedTeams()
        nodes_replaced = 0
        for html_filter in self.filters:
            self.logger.debug(f"Running {type(html_filter).__name__}", pprint=False)
            result = html_filter.call(document)
            document = result.document
            for team in result.mentioned_teams:
                mentioned.add(team)
            nodes_replaced += result.nodes_replaced
        return PipelineResult(
            html=render_html(document),
            mentioned_teams=mentioned.as_tuple(),
            nodes_replaced=nodes_replaced,
        )
