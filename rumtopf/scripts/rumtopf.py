"""
The ``rumtopf`` command generates a static recipe website from a directory of
Markdown recipes::

    $ rumtopf SOURCE_DIR DESTINATION_DIR

Input directory
===============

Each recipe is a Markdown file with a ``.md`` extension starting with a
H1-level title. Other files in the directory (e.g. images) are copied into the
website as-is.

Quantities in the recipe may be annotated so readers can rescale the recipe::

    # Pancakes

    Makes {{8 servings}}.

    Mix {{250}} g flour with {{2}} eggs...

Here ``{{8 servings}}`` becomes an input box for the number of servings and
each ``{{...}}`` number is scaled accordingly.

Translations
============

A recipe translated into another language is stored with a language suffix,
e.g. ``pancakes.de.md`` alongside ``pancakes.md``. When more than one language
is used, an index is generated for each language, recipes link to their
translations and ``index.html`` becomes a language selection page.

Exit status
===========

The exit status is 0 if successful, 1 if a fatal error occurred and 2 if the
website was generated but some files or pages failed.
"""

import sys

from argparse import ArgumentParser, ArgumentTypeError

from pathlib import Path

from rumtopf import __version__

from rumtopf.static_site.context import Link, SiteOptions
from rumtopf.static_site.exceptions import StaticSiteError
from rumtopf.static_site.website import generate_static_site


def link(value: str) -> Link:
    try:
        return Link.parse(value)
    except ValueError as e:
        raise ArgumentTypeError(str(e))


def main() -> None:
    parser = ArgumentParser(
        description="""
            A generator for a static recipe website.
        """,
    )

    parser.add_argument(
        "source",
        type=Path,
        help="""
            Directory with recipes in Markdown format.
        """,
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="""
            Directory to write the generated website to. Must not exist
            (unless --remove is given).
        """,
    )

    parser.add_argument(
        "--title",
        "-t",
        help="""
            Custom website title.
        """,
    )
    parser.add_argument(
        "--link",
        "-l",
        type=link,
        action="append",
        default=[],
        metavar="LABEL=HREF",
        help="""
            Add a link to the footer, with LABEL being the text shown. May be
            given multiple times.
        """,
    )
    parser.add_argument(
        "--footer",
        "-f",
        default="",
        help="""
            Add plain text to the footer.
        """,
    )
    parser.add_argument(
        "--templates",
        "-m",
        type=Path,
        help="""
            Directory with HTML templates to override the built-in ones.
        """,
    )
    parser.add_argument(
        "--remove",
        "-r",
        action="store_true",
        help="""
            Remove the entire destination directory before generating the
            website. Use with caution.
        """,
    )
    parser.add_argument(
        "--lang",
        "-g",
        help="""
            Language of the language selection page and of recipes without a
            language suffix. Default: the language shared by all recipes, or
            'en'.
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args()

    try:
        ctx = generate_static_site(
            args.source,
            args.destination,
            options=SiteOptions(
                title=args.title,
                links=args.link,
                footer=args.footer,
                lang=args.lang,
            ),
            templates=args.templates,
            remove=args.remove,
        )
    except StaticSiteError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if ctx.any_error:
        sys.exit(2)


if __name__ == "__main__":
    main()
