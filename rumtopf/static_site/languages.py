"""
Grouping of recipes by language.

A website is *multilingual* when its recipes use two or more distinct language
suffixes (where having no suffix counts as a distinct language). Multilingual
websites get one index per language, cross-links between translations of the
same dish and a language selection page.
"""

from typing import Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from dataclasses import dataclass

from rumtopf.static_site.recipe import Recipe


FALLBACK_LANG = "en"
"""The default language when it can neither be given nor inferred."""


def index_for_lang(lang: Optional[str]) -> str:
    """
    The file name of the index page for a language, or of the site index if
    None.
    """
    if lang is None:
        return "index.html"
    else:
        return f"index.{lang}.html"


def resolve_default_lang(
    languages: Iterable[Optional[str]], override: Optional[str] = None
) -> str:
    """
    Pick the default language: the override if given, otherwise the one
    language all recipes share, otherwise :py:data:`FALLBACK_LANG`.
    """
    if override is not None:
        return override

    distinct = set(languages)
    if len(distinct) == 1:
        (lang,) = distinct
        if lang is not None:
            return lang

    return FALLBACK_LANG


@dataclass(frozen=True)
class LanguageGrouping:
    """
    Language information for a complete, sorted, list of recipes. Created once
    all recipes have been parsed.
    """

    recipes: Sequence[Recipe]
    """All recipes in output order."""

    default_lang: str
    """The language assumed for recipes without a language suffix."""

    languages: Tuple[Optional[str], ...]
    """The distinct language suffixes used (None, if present, first)."""

    @classmethod
    def from_recipes(
        cls, recipes: Sequence[Recipe], override: Optional[str] = None
    ) -> "LanguageGrouping":
        distinct: Set[Optional[str]] = {recipe.lang for recipe in recipes}
        return cls(
            recipes=recipes,
            default_lang=resolve_default_lang(distinct, override),
            languages=tuple(
                sorted(distinct, key=lambda lang: (lang is not None, lang or ""))
            ),
        )

    @property
    def multilingual(self) -> bool:
        return len(self.languages) >= 2

    def effective_lang(self, recipe: Recipe) -> str:
        """The language of a recipe, or the default language if it has none."""
        return recipe.lang if recipe.lang is not None else self.default_lang

    @property
    def index_languages(self) -> List[str]:
        """
        The languages which get their own index page in a multilingual
        website, in sorted order. Recipes without a language are listed under
        the default language.
        """
        return sorted({self.effective_lang(recipe) for recipe in self.recipes})

    def siblings(self, recipe: Recipe) -> List[Recipe]:
        """Translations of the given recipe's dish into other languages."""
        return [
            other
            for other in self.recipes
            if other.short == recipe.short and other.lang != recipe.lang
        ]

    def index_link(self, recipe: Recipe) -> str:
        """The index page a recipe's page should link back to."""
        if self.multilingual:
            return index_for_lang(self.effective_lang(recipe))
        else:
            return index_for_lang(None)

    def dish_count(self, lang: Optional[str] = None) -> int:
        """
        The number of distinct dishes, counting each dish once regardless of
        its number of translations. If a language is given, only dishes
        available in that (effective) language are counted.
        """
        return len(
            {
                recipe.short
                for recipe in self.recipes
                if lang is None or self.effective_lang(recipe) == lang
            }
        )

    def dish_counts(self) -> Mapping[str, int]:
        return {lang: self.dish_count(lang) for lang in self.index_languages}
