r"""
Rumtopf extends Markdown with the curly-bracket annotation shorthand (see
:py:mod:`rumtopf.annotations`). A recipe document is compiled using:

.. autofunction:: compile_markdown

This produces a :py:class:`ParsedMarkdown` object holding the rendered HTML
body, the recipe title and any annotations which could not be substituted.

Internals
=========

Internally the :py:mod:`marko` markdown parser is used providing support for
`CommonMark <https://commonmark.org/>`_ markdown syntax. The
:py:class:`RumtopfRendererMixin` hooks the rendering of text, inline code, code
blocks and level-1 headings as marko walks the parsed document (once, in
document order).
"""

from typing import Any, List, Optional, cast

import html

from enum import Enum, auto

from dataclasses import dataclass, field

from marko import Markdown, block, inline  # type: ignore

from jinja2 import Environment

from rumtopf.annotations import substitute_annotations
from rumtopf.exceptions import RumtopfError


class TitleState(Enum):
    """Whether the renderer is currently within the title heading."""

    OUTSIDE = auto()
    IN_TITLE = auto()


@dataclass
class ParsedMarkdown:
    """The result of compiling a recipe markdown document."""

    html: str = ""
    """The rendered HTML body, with annotations substituted."""

    title: Optional[str] = None
    """
    The raw text of the first level-1 heading, before annotation
    substitution and without HTML escaping. For example, the markdown title
    "# Borscht {{4 servings}}" gives the title "Borscht {{4 servings}}".

    If None, no (H1 level) title was given in the document.
    """

    errors: List[RumtopfError] = field(default_factory=list)
    """Annotations which were left in the output as-is, in document order."""


class RumtopfRendererMixin:
    """
    Mixin for :py:class:`marko.html_renderer.HTMLRenderer` which substitutes
    annotations in text and code, emitting the result as raw HTML, and
    captures the recipe title.

    The :py:attr:`environment` attribute must be assigned before rendering.
    """

    environment: Environment
    """The environment holding the annotation fragment templates."""

    output: ParsedMarkdown
    """
    The parsed markdown structure, populated during rendering and returned as
    the final render result.
    """

    title_state: TitleState

    title_parts: List[str]
    """Raw text seen so far within the title heading."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)  # type: ignore

        self.output = ParsedMarkdown()
        self.title_state = TitleState.OUTSIDE
        self.title_parts = []

    def capture_title(self, text: str) -> None:
        if self.title_state is TitleState.IN_TITLE:
            self.title_parts.append(text)

    def render_heading(self, element: block.Heading) -> str:
        """Render headings, capturing the text of the first H1 as the title."""
        if element.level != 1 or self.output.title is not None:
            return cast(str, super().render_heading(element))  # type: ignore

        self.title_state = TitleState.IN_TITLE
        rendered = cast(str, super().render_heading(element))  # type: ignore
        self.title_state = TitleState.OUTSIDE

        self.output.title = "".join(self.title_parts).strip()
        return rendered

    def render_raw_text(self, element: inline.RawText) -> str:
        """
        Substitute annotations in text. Falls back on marko's own rendering if
        substitution cannot be attempted.
        """
        self.capture_title(html.unescape(element.children))

        substitution = substitute_annotations(
            element.children, self.environment, escape=self.escape_html  # type: ignore
        )
        self.output.errors.extend(substitution.errors)
        if substitution.html is None:
            return cast(str, super().render_raw_text(element))  # type: ignore

        return substitution.html

    def render_code_span(self, element: inline.CodeSpan) -> str:
        """Substitute annotations within inline code."""
        self.capture_title(element.children)

        substitution = substitute_annotations(element.children, self.environment)
        self.output.errors.extend(substitution.errors)
        if substitution.html is None:
            return cast(str, super().render_code_span(element))  # type: ignore

        return f"<code>{substitution.html}</code>"

    def render_fenced_code(self, element: block.FencedCode) -> str:
        """Substitute annotations within fenced code blocks."""
        substitution = substitute_annotations(
            element.children[0].children, self.environment
        )
        self.output.errors.extend(substitution.errors)
        if substitution.html is None:
            return cast(str, super().render_fenced_code(element))  # type: ignore

        lang = (
            f' class="language-{self.escape_html(element.lang)}"'  # type: ignore
            if element.lang
            else ""
        )
        return f"<pre><code{lang}>{substitution.html}</code></pre>\n"

    def render_code_block(self, element: block.CodeBlock) -> str:
        """Substitute annotations within indented code blocks."""
        return self.render_fenced_code(element)

    def render_document(self, element: block.Document) -> ParsedMarkdown:
        self.output.html = super().render_children(element)  # type: ignore
        return self.output


class Rumtopf:
    """
    A :py:mod:`marko` extension which causes the renderer to output a
    :py:class:`ParsedMarkdown` object.
    """

    elements: List[type] = []
    parser_mixins: List[type] = []
    renderer_mixins = [RumtopfRendererMixin]


def compile_markdown(markdown_source: str, environment: Environment) -> ParsedMarkdown:
    """
    Compile a recipe markdown document into HTML, substituting annotations
    using the fragment templates in the provided :py:mod:`jinja2` environment.

    Annotations which cannot be substituted never cause this function to fail:
    they are left as-is and listed in :py:attr:`ParsedMarkdown.errors`.
    """
    markdown = Markdown(extensions=[Rumtopf])
    document = markdown.parse(markdown_source)
    markdown.renderer.environment = environment
    return cast(ParsedMarkdown, markdown.render(document))
