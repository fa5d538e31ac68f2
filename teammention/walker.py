"""Walk the text nodes of a parsed HTML document and rewrite them.

Only plain text nodes are considered. Comments, CDATA sections, doctypes,
processing instructions and the raw contents of <script>, <style> and
<template> are left alone, as is any text under an ignored ancestor: code
samples, preformatted blocks, existing links and elements that already hold a
rendered mention.
"""

from typing import Callable, Iterable, Iterator

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString, Script, Stylesheet, TemplateString

from teammention.context import DEFAULT_IGNORE_PARENTS
from teammention.document import parse_html
from teammention.substitutor import TEAM_MENTION_CLASS

IGNORE_PARENTS: frozenset[str] = frozenset(DEFAULT_IGNORE_PARENTS)

# Text inside an already-rendered mention is never rewritten again.
IGNORE_CLASSES: frozenset[str] = frozenset({TEAM_MENTION_CLASS})

# Strings that are not rendered prose. Script and style text is written out
# unescaped, so rewriting it would splice markup into code.
SKIPPED_STRING_TYPES = (PreformattedString, Script, Stylesheet, TemplateString)


def has_ignored_ancestor(
    node: NavigableString,
    ignore_parents: Iterable[str] = IGNORE_PARENTS,
    ignore_classes: Iterable[str] = IGNORE_CLASSES,
) -> bool:
    """Return True if any ancestor of `node`, up to the root, is ignored.

    An ancestor is ignored when its element name is in `ignore_parents` or it
    carries one of `ignore_classes`.
    """
    names = frozenset(ignore_parents)
    classes = frozenset(ignore_classes)
    for parent in node.parents:
        if parent.name in names:
            return True
        if classes and classes.intersection(parent.get("class") or ()):
            return True
    return False


def iter_text_nodes(root: Tag) -> Iterator[NavigableString]:
    """Yield the content text nodes under `root` in document order.

    The node list is captured before the first yield, so callers may replace
    yielded nodes without affecting iteration.
    """
    for node in list(root.find_all(string=True)):
        if isinstance(node, SKIPPED_STRING_TYPES):
            continue
        yield node


def walk_text_nodes(
    root: Tag,
    substitute: Callable[[str], str],
    ignore_parents: Iterable[str] = IGNORE_PARENTS,
    ignore_classes: Iterable[str] = IGNORE_CLASSES,
) -> int:
    """Pass qualifying text nodes through `substitute` and write back changes.

    Each node's text is serialized with minimal entity escaping before it is
    handed over, and the returned string is parsed as markup. Nodes whose text
    comes back unchanged are not touched.

    Returns:
        Number of text nodes that were replaced.
    """
    ignore_parents = frozenset(ignore_parents)
    ignore_classes = frozenset(ignore_classes)
    replaced = 0
    for node in iter_text_nodes(root):
        content = node.output_ready(formatter="minimal")
        if "@" not in content:
            continue
        if has_ignored_ancestor(node, ignore_parents, ignore_classes):
            continue
        html = substitute(content)
        if html == content:
            continue
        fragment = parse_html(html)
        node.replace_with(*list(fragment.contents))
        replaced += 1
    return replaced
