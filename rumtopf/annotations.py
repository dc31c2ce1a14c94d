"""
Substitution of the curly-bracket annotation shorthand used within recipe
prose.

Two forms of annotation are supported::

    Serves {{4 servings}}.          -> rendered with the 'servings' fragment
    Add {{200}} g of flour.         -> rendered with the 'scaling' fragment

The first form marks the number of servings the recipe is written for (and is
typically rendered as an input box allowing the reader to choose another
number) and the second a quantity which should be scaled accordingly.

Fragments are rendered by the :py:mod:`jinja2` templates named by
:py:data:`SERVINGS_TEMPLATE` and :py:data:`SCALING_TEMPLATE`.

.. autofunction:: substitute_annotations
"""

from typing import Callable, List, NamedTuple, Optional

import re
from re import Match

import html

from jinja2 import Environment, Template, TemplateError

from rumtopf.number_parser import number
from rumtopf.exceptions import (
    RumtopfError,
    AnnotationError,
    FragmentTemplateError,
)


SERVINGS_TEMPLATE = "servings.html"
SCALING_TEMPLATE = "scaling.html"


annotation_pattern = re.compile(r"\{\{\s*(?P<content>[^{}]*?)\s*\}\}")
"""
Matches a complete ``{{...}}`` annotation, capturing the content without
surrounding whitespace.
"""

servings_pattern = re.compile(r"(?P<servings>.+?)\s+servings?", re.ASCII)
"""
Matched (in full) against an annotation's content to identify the servings
form. Case sensitive.
"""


class Substitution(NamedTuple):
    """The outcome of :py:func:`substitute_annotations`."""

    html: Optional[str]
    """
    The escaped text with annotations substituted, or None if no substitution
    could be attempted at all (in which case the caller should fall back on
    the unmodified text).
    """

    errors: List[RumtopfError]
    """
    Errors for annotations which were left as-is, or a single
    :py:exc:`~rumtopf.exceptions.FragmentTemplateError` when :py:attr:`html`
    is None.
    """


def _render_annotation(
    match: Match[str],
    servings_template: Template,
    scaling_template: Template,
) -> str:
    """
    Render a single annotation match. Throws :py:exc:`ValueError` for
    unparsable numbers and :py:exc:`jinja2.TemplateError` for failed renders.
    """
    content = html.unescape(match["content"])

    servings_match = servings_pattern.fullmatch(content)
    if servings_match is not None:
        return servings_template.render(servings=number(servings_match["servings"]))
    else:
        return scaling_template.render(base=number(content))


def substitute_annotations(
    text: str,
    environment: Environment,
    escape: Callable[[str], str] = html.escape,
) -> Substitution:
    """
    HTML-escape the supplied raw text and substitute all annotations within it
    with rendered fragments.

    The servings form is always tried first so a servings annotation is never
    treated as a scaling annotation, even when it is malformed. Annotations
    are replaced in a single pass so that the rendered fragments are never
    themselves searched for annotations.

    Annotations which fail to parse or render are left verbatim and reported
    in the returned :py:class:`Substitution`: one bad annotation never
    prevents the rest of the text from being substituted.

    Parameters
    ==========
    text : str
        The raw (unescaped) text.
    environment : jinja2.Environment
        The environment holding the fragment templates.
    escape : str -> str
        The function used to HTML-escape the text.
    """
    escaped = escape(text)
    if annotation_pattern.search(escaped) is None:
        return Substitution(escaped, [])

    try:
        servings_template = environment.get_template(SERVINGS_TEMPLATE)
        scaling_template = environment.get_template(SCALING_TEMPLATE)
    except TemplateError as e:
        return Substitution(
            None, [FragmentTemplateError(f"Cannot load annotation fragments: {e}")]
        )

    errors: List[RumtopfError] = []

    def substitute(match: Match[str]) -> str:
        try:
            return _render_annotation(match, servings_template, scaling_template)
        except (ValueError, TemplateError) as e:
            errors.append(
                AnnotationError(
                    f"Leaving annotation {html.unescape(match[0])} as-is: {e}"
                )
            )
            return match[0]

    return Substitution(annotation_pattern.sub(substitute, escaped), errors)
