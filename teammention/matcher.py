"""Find `@organization/team` mentions in plain text.

The matcher knows nothing about HTML or about whether a mention resolves. It
only reports where mention-shaped spans are, so it can be tested on its own
and reused by any substitution strategy.
"""

import re
from typing import Iterator

from pydantic import BaseModel, Field

MENTION_PATTERN = re.compile(
    r"""
    (?:^|(?<=\W))               # beginning of string or after a non-word char
    @([a-z0-9][a-z0-9-]+)       # @organization
    /                           # dividing slash
    ([a-z0-9][a-z0-9-]+)        # team
    (?=
        \.\s|                   # dot followed by whitespace
        \.\Z|                   # dot at end of input
        [^0-9a-z_.]|            # non-word character except dot
        \Z                      # end of input
    )
    """,
    re.IGNORECASE | re.ASCII | re.VERBOSE,
)


class MentionToken(BaseModel, frozen=True):
    """A mention-shaped span found in a text blob.

    The org and team names keep the casing the author typed; canonical casing
    only comes back from resolution.
    """

    text: str = Field(description="The full matched span, e.g. '@acme/frontend'.")
    org_name: str = Field(description="Organization login as written.")
    team_name: str = Field(description="Team name as written.")
    start_offset: int = Field(ge=0, description="Offset of the '@' in the scanned text.")
    end_offset: int = Field(ge=0, description="Offset just past the team name.")


def find_mentions(text: str) -> Iterator[MentionToken]:
    """Yield every mention in `text`, left to right.

    The characters on either side of a mention (the boundary before the '@'
    and any trailing punctuation) are never part of the token.
    """
    for match in MENTION_PATTERN.finditer(text):
        yield MentionToken(
            text=match.group(0),
            org_name=match.group(1),
            team_name=match.group(2),
            start_offset=match.start(),
            end_offset=match.end(),
        )
