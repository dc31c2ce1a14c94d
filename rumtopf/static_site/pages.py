"""
Rendering and writing of the website's pages.

The following pages are produced in the destination directory:

* ``<stem>.html``: One page per recipe.
* ``index.html``: The recipe index (single-language websites) or the language
  selection page (multilingual websites).
* ``index.<lang>.html``: One recipe index per language (multilingual websites
  only).

Pages are never overwritten: a page whose file already exists is reported as
an error and skipped.
"""

from typing import Any, List, Mapping

from jinja2 import TemplateError

from rumtopf.static_site.context import BuildContext
from rumtopf.static_site.exceptions import (
    StaticSiteError,
    PageRenderError,
    PageWriteError,
    OutputExistsError,
)
from rumtopf.static_site.languages import LanguageGrouping, index_for_lang
from rumtopf.static_site.recipe import Recipe
from rumtopf.static_site.templates import (
    RECIPE_TEMPLATE,
    INDEX_TEMPLATE,
    LANGUAGE_SELECTOR_TEMPLATE,
)


def write_page(
    ctx: BuildContext,
    filename: str,
    template_name: str,
    variables: Mapping[str, Any],
) -> None:
    """
    Render a page template and write it to a new file in the destination
    directory.
    """
    try:
        html = ctx.environment.get_template(template_name).render(
            **ctx.get_template_variables(),
            **variables,
        )
    except TemplateError as e:
        raise PageRenderError(
            f"Failed to render template {template_name} for {filename}: {e}"
        ) from e

    path = ctx.destination / filename
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(html)
    except FileExistsError as e:
        raise OutputExistsError(f"{path} already exists") from e
    except OSError as e:
        raise PageWriteError(f"Failed to write {path}: {e}") from e


def recipe_summary(grouping: LanguageGrouping, recipe: Recipe) -> Mapping[str, Any]:
    """The template variables describing a recipe in an index listing."""
    return {
        "title": recipe.title,
        "link": recipe.page_name,
        "lang": grouping.effective_lang(recipe),
    }


def write_recipe(ctx: BuildContext, grouping: LanguageGrouping, recipe: Recipe) -> None:
    write_page(
        ctx,
        recipe.page_name,
        RECIPE_TEMPLATE,
        {
            "title": recipe.title,
            "body": recipe.body,
            "lang": grouping.effective_lang(recipe),
            "index": grouping.index_link(recipe),
            "langs": [
                {
                    "lang": grouping.effective_lang(sibling),
                    "link": sibling.page_name,
                }
                for sibling in grouping.siblings(recipe)
            ],
        },
    )


def write_recipes(ctx: BuildContext, grouping: LanguageGrouping) -> None:
    """Write every recipe page, reporting (and skipping) those which fail."""
    for recipe in grouping.recipes:
        try:
            write_recipe(ctx, grouping, recipe)
        except StaticSiteError as e:
            ctx.report(e)


def write_index(
    ctx: BuildContext,
    grouping: LanguageGrouping,
    filename: str,
    lang: str,
    this_lang: List[Recipe],
    other_lang: List[Recipe],
    langs: List[Mapping[str, Any]],
) -> None:
    write_page(
        ctx,
        filename,
        INDEX_TEMPLATE,
        {
            "lang": lang,
            "index": index_for_lang(None),
            "this_lang": [recipe_summary(grouping, r) for r in this_lang],
            "other_lang": [recipe_summary(grouping, r) for r in other_lang],
            "langs": langs,
        },
    )


def write_language_selector(
    ctx: BuildContext,
    grouping: LanguageGrouping,
    langs: List[Mapping[str, Any]],
) -> None:
    write_page(
        ctx,
        index_for_lang(None),
        LANGUAGE_SELECTOR_TEMPLATE,
        {
            "lang": grouping.default_lang,
            "index": index_for_lang(None),
            "langs": langs,
            "recipe_count": grouping.dish_count(),
        },
    )


def write_indices(ctx: BuildContext, grouping: LanguageGrouping) -> None:
    """
    Write the index page(s). Single-language websites get a single
    ``index.html`` listing every recipe. Multilingual websites get an index
    per language plus a language selection page as ``index.html``.
    """
    if not grouping.multilingual:
        try:
            write_index(
                ctx,
                grouping,
                index_for_lang(None),
                grouping.default_lang,
                this_lang=list(grouping.recipes),
                other_lang=[],
                langs=[],
            )
        except StaticSiteError as e:
            ctx.report(e)
        return

    dish_counts = grouping.dish_counts()
    language_pages = [
        {"lang": lang, "link": index_for_lang(lang), "count": dish_counts[lang]}
        for lang in grouping.index_languages
    ]

    for lang in grouping.index_languages:
        this_lang = []
        other_lang = []
        for recipe in grouping.recipes:
            if grouping.effective_lang(recipe) == lang:
                this_lang.append(recipe)
            else:
                other_lang.append(recipe)

        try:
            write_index(
                ctx,
                grouping,
                index_for_lang(lang),
                lang,
                this_lang=this_lang,
                other_lang=other_lang,
                langs=[page for page in language_pages if page["lang"] != lang],
            )
        except StaticSiteError as e:
            ctx.report(e)

    try:
        write_language_selector(ctx, grouping, language_pages)
    except StaticSiteError as e:
        ctx.report(e)
