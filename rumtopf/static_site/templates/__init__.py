from typing import Optional

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    select_autoescape,
)

from rumtopf.number_formatting import format_float

from rumtopf.static_site.exceptions import TemplateDirectoryError
from rumtopf.static_site.l10n import L10n


RECIPE_TEMPLATE = "recipe.html"
INDEX_TEMPLATE = "index.html"
LANGUAGE_SELECTOR_TEMPLATE = "lang.html"

STATIC_ASSETS = ["style.css", "rumtopf.js"]
"""Templates rendered verbatim into the root of every generated website."""


def make_environment(
    override_directory: Optional[Path] = None,
    fallback_lang: str = "en",
) -> Environment:
    """
    Create the :py:mod:`jinja2` environment holding the page, fragment and
    static asset templates.

    Parameters
    ==========
    override_directory : Path or None
        If given, templates in this directory are used in place of the
        built-in templates with the same name.
    fallback_lang : str
        The language used by the ``l10n`` template helper when a string is not
        available in a page's language.
    """
    loader: BaseLoader = PackageLoader("rumtopf", "static_site/templates")
    if override_directory is not None:
        if not override_directory.is_dir():
            raise TemplateDirectoryError(
                f"Template directory {override_directory} is not a directory"
            )
        loader = ChoiceLoader([FileSystemLoader(override_directory), loader])

    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
    )
    env.filters["number"] = format_float
    env.globals["l10n"] = L10n(fallback_lang).template_helper

    return env
