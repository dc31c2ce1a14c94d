"""
Parsing of recipe markdown files.

Each recipe lives in its own markdown file named ``<short>.md`` or, for a
translation, ``<short>.<lang>.md`` (e.g. ``cake.md`` and ``cake.de.md`` are two
versions of the same dish).
"""

from typing import List, Optional, Tuple

from pathlib import Path

from dataclasses import dataclass, field

from jinja2 import Environment

from rumtopf.exceptions import RumtopfError
from rumtopf.markdown import compile_markdown

from rumtopf.static_site.exceptions import MissingStemError, RecipeReadError


@dataclass(frozen=True)
class Recipe:
    title: str
    """
    The raw text of the recipe's H1 title (empty if missing). Annotations are
    not substituted and HTML is not escaped.
    """

    stem: str
    """The file name without the '.md' extension (e.g. "cake.de")."""

    short: str
    """The stem without any language suffix, identifying the dish (e.g. "cake")."""

    lang: Optional[str]
    """The language suffix of the stem, if any (e.g. "de")."""

    body: str = field(repr=False, compare=False)
    """The rendered HTML body."""

    @property
    def sort_key(self) -> Tuple[str, str, str]:
        return (self.title, self.stem, self.lang or "")

    @property
    def page_name(self) -> str:
        """The file name of this recipe's page in the generated website."""
        return f"{self.stem}.html"


def split_stem(stem: str) -> Tuple[str, Optional[str]]:
    """
    Split a recipe file stem into the dish name and language, e.g. "cake.de"
    becomes ("cake", "de") and "cake" becomes ("cake", None).
    """
    short, dot, lang = stem.rpartition(".")
    if not dot or not short or not lang:
        return (stem, None)
    return (short, lang)


def parse_recipe(
    path: Path, environment: Environment
) -> Tuple[Recipe, List[RumtopfError]]:
    """
    Read and compile a recipe markdown file.

    Throws :py:exc:`~rumtopf.static_site.exceptions.MissingStemError` or
    :py:exc:`~rumtopf.static_site.exceptions.RecipeReadError` if the file
    cannot be used at all. Annotations which could not be substituted are
    returned alongside the recipe (prefixed with the file path) rather than
    thrown.
    """
    stem = path.stem
    if not stem or stem.startswith("."):
        raise MissingStemError(f"{path} has no file name stem")

    short, lang = split_stem(stem)

    try:
        with path.open(encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeReadError(f"Failed to read {path}: {e}") from e

    parsed = compile_markdown(source, environment)

    errors: List[RumtopfError] = [
        type(error)(f"{path}: {error}") for error in parsed.errors
    ]

    return (
        Recipe(
            title=parsed.title if parsed.title is not None else "",
            stem=stem,
            short=short,
            lang=lang,
            body=parsed.html,
        ),
        errors,
    )
