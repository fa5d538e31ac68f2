"""HTML parse and serialize helpers around BeautifulSoup."""

from bs4 import BeautifulSoup, Tag

PARSER = "html.parser"


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML document or fragment.

    Uses the stdlib-backed html.parser builder so fragments are not wrapped
    in <html>/<body> and serialization round-trips the input structure.
    """
    return BeautifulSoup(html, PARSER)


def render_html(document: Tag) -> str:
    """Serialize a parsed document back to HTML."""
    return document.decode(formatter="minimal")
