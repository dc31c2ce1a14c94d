"""
Localised user interface strings for the website templates.

Strings are kept in ``l10n.json`` alongside this module as a mapping from key
to a mapping from language to text. Texts may contain :py:meth:`str.format`
style positional placeholders (e.g. ``{0} recipes``).

Templates access these via the ``l10n`` global::

    {{ l10n("recipe_count", 3) }}

The language is taken from the ``lang`` variable of the template being
rendered.
"""

from typing import Any, Mapping, Optional, TextIO

import sys

import json

from pathlib import Path

from jinja2 import TemplateError, pass_context
from jinja2.runtime import Context


L10N_PATH = Path(__file__).parent / "l10n.json"


class MissingTranslationError(TemplateError):
    """Thrown when a string is missing in both the requested and fallback language."""


class L10n:
    def __init__(
        self,
        fallback_lang: str,
        strings: Optional[Mapping[str, Mapping[str, str]]] = None,
        warning_stream: Optional[TextIO] = None,
    ) -> None:
        if strings is None:
            with L10N_PATH.open(encoding="utf-8") as f:
                strings = json.load(f)
        self.fallback_lang = fallback_lang
        self.strings = strings
        self.warning_stream = warning_stream

    def lookup(self, key: str, lang: Optional[str]) -> str:
        """
        Get the text for a key in the given language, falling back on the
        fallback language if no translation is available.
        """
        translations = self.strings.get(key, {})
        if lang is not None:
            if lang in translations:
                return translations[lang]
            (self.warning_stream or sys.stderr).write(
                f"Missing lang {lang} for key {key}, trying fallback...\n"
            )

        try:
            return translations[self.fallback_lang]
        except KeyError:
            raise MissingTranslationError(
                f"Missing lang {self.fallback_lang} for key {key}"
            )

    @pass_context
    def template_helper(self, context: Context, key: str, *params: Any) -> str:
        return self.lookup(key, context.get("lang")).format(*params)
