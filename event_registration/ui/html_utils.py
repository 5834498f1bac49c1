"""Helpers for building HTML snippets rendered through st.markdown."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten multi-line HTML for st.markdown.

    Lines indented by four or more spaces would be rendered as a Markdown
    code block, so every line is left-stripped after dedenting.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def text(value) -> str:
    """Escape user- or API-supplied text for inclusion in HTML."""
    return escape("" if value is None else str(value), quote=True)


def multiline_text(value) -> str:
    """Escape text and keep its line breaks."""
    return text(value).replace("\n", "<br>")
