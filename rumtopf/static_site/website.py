"""
Static recipe website generator.

Every ``.md`` file in the source directory is compiled into a recipe page and
listed in the index. All other files (e.g. images) are copied into the
website unchanged. Subdirectories are not supported.

Recipe file names may carry a language suffix (e.g. ``cake.de.md``), in which
case language-specific indices and links between translations of the same
dish are generated (see :py:mod:`rumtopf.static_site.languages`).

The built-in static assets (see
:py:data:`rumtopf.static_site.templates.STATIC_ASSETS`) are written first so
that source files of the same name replace them.
"""

from typing import List, Optional, TextIO

import sys

import shutil

from pathlib import Path

from jinja2 import TemplateError

from rumtopf.static_site.context import BuildContext, SiteOptions
from rumtopf.static_site.exceptions import (
    StaticSiteError,
    DestinationError,
    SourceDirectoryError,
    NotAFileError,
    SourceCopyError,
    PageRenderError,
    PageWriteError,
)
from rumtopf.static_site.languages import LanguageGrouping, FALLBACK_LANG
from rumtopf.static_site.pages import write_recipes, write_indices
from rumtopf.static_site.recipe import Recipe, parse_recipe
from rumtopf.static_site.templates import STATIC_ASSETS, make_environment


def prepare_destination(destination: Path, remove: bool = False) -> None:
    """
    Create the (new) destination directory, first removing any existing
    directory if ``remove`` is True.
    """
    if remove and destination.exists():
        try:
            shutil.rmtree(destination)
        except OSError as e:
            raise DestinationError(
                f"Failed to remove destination directory {destination}: {e}"
            ) from e

    try:
        destination.mkdir()
    except OSError as e:
        raise DestinationError(
            f"Failed to create destination directory {destination}: {e}"
        ) from e


def write_static_assets(ctx: BuildContext) -> None:
    for name in STATIC_ASSETS:
        try:
            try:
                content = ctx.environment.get_template(name).render()
            except TemplateError as e:
                raise PageRenderError(
                    f"Failed to render static file {name}: {e}"
                ) from e
            try:
                (ctx.destination / name).write_text(content, encoding="utf-8")
            except OSError as e:
                raise PageWriteError(
                    f"Failed to write static file {name}: {e}"
                ) from e
        except StaticSiteError as e:
            ctx.report(e)


def process_source(ctx: BuildContext, path: Path) -> Optional[Recipe]:
    """
    Parse a recipe source file or copy any other file into the website.
    Returns the recipe, or None for copied files.
    """
    if not path.is_file():
        raise NotAFileError(f"Skipping {path}: not a file")

    if path.suffix.lower() != ".md":
        try:
            shutil.copyfile(path, ctx.destination / path.name)
        except OSError as e:
            raise SourceCopyError(f"Failed to copy {path}: {e}") from e
        return None

    recipe, errors = parse_recipe(path, ctx.environment)
    for error in errors:
        ctx.report(error)
    return recipe


def process_source_directory(ctx: BuildContext, source: Path) -> List[Recipe]:
    """Process every file in the source directory, in file name order."""
    try:
        paths = sorted(source.iterdir())
    except OSError as e:
        raise SourceDirectoryError(
            f"Failed to read source directory {source}: {e}"
        ) from e

    recipes = []
    for path in paths:
        try:
            recipe = process_source(ctx, path)
        except StaticSiteError as e:
            ctx.report(e)
            continue

        if recipe is not None:
            recipes.append(recipe)

    return recipes


def generate_static_site(
    source: Path,
    destination: Path,
    options: Optional[SiteOptions] = None,
    templates: Optional[Path] = None,
    remove: bool = False,
    error_stream: Optional[TextIO] = None,
) -> BuildContext:
    """
    Generate a static recipe website.

    Errors affecting only individual files or pages are reported to
    ``error_stream`` (stderr by default) and the affected file or page
    skipped; check :py:attr:`BuildContext.any_error` on the returned context.
    Errors which prevent generating a website at all are thrown as
    :py:exc:`~rumtopf.static_site.exceptions.StaticSiteError`.

    Parameters
    ==========
    source: Path
        The directory containing the recipe markdown files.
    destination: Path
        The directory to write the website into. Must not already exist.
    options: SiteOptions
        Website title, footer and language settings.
    templates: Path or None
        A directory of templates overriding the built-in ones.
    remove: bool
        If True, the destination directory and all of its contents are
        removed before generation.
    """
    if options is None:
        options = SiteOptions()

    environment = make_environment(
        templates, fallback_lang=options.lang or FALLBACK_LANG
    )

    prepare_destination(destination, remove)

    ctx = BuildContext(
        destination=destination,
        environment=environment,
        options=options,
        error_stream=error_stream if error_stream is not None else sys.stderr,
    )

    write_static_assets(ctx)

    recipes = process_source_directory(ctx, source)
    recipes.sort(key=lambda recipe: recipe.sort_key)
    grouping = LanguageGrouping.from_recipes(recipes, options.lang)

    write_recipes(ctx, grouping)
    write_indices(ctx, grouping)

    return ctx
