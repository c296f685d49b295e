"""Whitespace layout helpers for splicing elements into an existing tree."""

from lxml import etree

INDENT_STEP = "   "


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def whitespace_before(parent: etree._Element, index: int) -> str | None:
    """Whitespace preceding the child at ``index``, or None for mixed content."""
    text = parent.text if index == 0 else parent[index - 1].tail
    if text is None or text.strip():
        return None
    return text


def indent_subtree(element: etree._Element, indent: str | None, step: str = INDENT_STEP) -> None:
    """Lay out the children of ``element`` one per line, ``step`` deeper than ``indent``.

    ``indent`` is the whitespace that precedes ``element`` itself. Without a
    line break in it the document is compact and nothing is changed. Text
    that is not pure whitespace is never touched.
    """
    if indent is None or "\n" not in indent:
        return
    indent = "\n" + indent.rsplit("\n", 1)[1]

    children = list(element)
    if not children:
        return

    child_indent = indent + step
    if _is_blank(element.text):
        element.text = child_indent
    for child in children:
        if _is_blank(child.tail):
            child.tail = child_indent
        indent_subtree(child, child_indent, step)
    if _is_blank(children[-1].tail):
        children[-1].tail = indent
