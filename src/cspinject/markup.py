"""Meta-tag rendering and head insertion.

The tag is rendered through kida so the verbatim and escaped variants share
one template. Insertion is plain first-occurrence string replacement: the
built HTML is treated as opaque text, never parsed.
"""

from functools import cache
from typing import TYPE_CHECKING

from kida import Environment

if TYPE_CHECKING:
    from kida.template import Template

META_TEMPLATE = '<meta http-equiv="Content-Security-Policy" content="{{ policy }}">'


@cache
def _meta_template(escape_quotes: bool) -> Template:
    env = Environment(autoescape=escape_quotes)
    return env.from_string(META_TEMPLATE)


def render_meta_tag(policy: str, *, escape_quotes: bool = False) -> str:
    """Render the CSP ``<meta>`` element for *policy*.

    With ``escape_quotes=False`` the policy is embedded verbatim, so a
    policy containing ``"`` produces a broken attribute. Pass
    ``escape_quotes=True`` to HTML-escape the value instead.
    """
    return _meta_template(escape_quotes).render({"policy": policy})


def insert_after_head(
    html: str,
    snippet: str,
    *,
    head_tag: str = "<head>",
    indent: str = "  ",
) -> str:
    """Insert *snippet* on its own line right after the first *head_tag*.

    Whatever followed *head_tag* moves to the next line, indented by
    *indent*. ``<head><title>t</title>`` becomes::

        <head>
          SNIPPET
          <title>t</title>

    Only the first occurrence is touched.

    Raises:
        ValueError: If *head_tag* does not occur in *html*.

    """
    if head_tag not in html:
        msg = f"{head_tag!r} not found"
        raise ValueError(msg)
    return html.replace(head_tag, f"{head_tag}\n{indent}{snippet}\n{indent}", 1)
