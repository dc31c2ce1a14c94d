"""
State shared by every stage of a website build.
"""

from typing import Any, List, Mapping, Optional, TextIO, NamedTuple

import sys

from pathlib import Path

from dataclasses import dataclass, field

from jinja2 import Environment

from rumtopf import __version__


DEFAULT_SITE_TITLE = "Recipes"


class Link(NamedTuple):
    """A link shown in the footer of every page."""

    label: str
    href: str

    @classmethod
    def parse(cls, value: str) -> "Link":
        """
        Parse a link given as ``label=href``. Throws :py:exc:`ValueError` if
        there is no '='.
        """
        label, equals, href = value.partition("=")
        if not equals:
            raise ValueError(f"link {value!r} does not contain a '='")
        return cls(label, href)


@dataclass
class SiteOptions:
    """User-facing configuration of the generated website."""

    title: Optional[str] = None
    """Custom website title. If None, :py:data:`DEFAULT_SITE_TITLE` is shown."""

    links: List[Link] = field(default_factory=list)
    """Links to add to the footer."""

    footer: str = ""
    """Plain text to add to the footer."""

    lang: Optional[str] = None
    """
    The language used for the language selection page and for recipes without
    a language suffix. If None, inferred from the recipes.
    """


@dataclass
class BuildContext:
    """
    Passed to every stage of the build. Errors which only affect part of the
    website are reported here rather than thrown.
    """

    destination: Path
    environment: Environment
    options: SiteOptions = field(default_factory=SiteOptions)
    error_stream: TextIO = field(default_factory=lambda: sys.stderr)

    any_error: bool = False
    """Set when any error has been reported."""

    def report(self, error: Exception) -> None:
        """Report a non-fatal error and note that the build was not clean."""
        self.any_error = True
        self.error_stream.write(f"Error: {error}\n")

    def get_template_variables(self) -> Mapping[str, Any]:
        """Site-wide variables available to every page template."""
        return {
            "site": {
                "title": self.options.title or DEFAULT_SITE_TITLE,
                "custom_title": self.options.title is not None,
                "links": self.options.links,
                "footer": self.options.footer,
                "version": __version__,
            },
        }
