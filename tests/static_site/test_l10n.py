import pytest

from io import StringIO

from jinja2 import DictLoader, Environment

from rumtopf.static_site.l10n import L10n, MissingTranslationError


STRINGS = {
    "recipes": {"en": "Recipes", "de": "Rezepte"},
    "recipe_count": {"en": "{0} recipes"},
    "untranslated": {"de": "Nur Deutsch"},
}


@pytest.fixture
def warnings() -> StringIO:
    return StringIO()


@pytest.fixture
def l10n(warnings: StringIO) -> L10n:
    return L10n("en", STRINGS, warning_stream=warnings)


class TestLookup:
    def test_translated(self, l10n: L10n, warnings: StringIO) -> None:
        assert l10n.lookup("recipes", "de") == "Rezepte"
        assert l10n.lookup("recipes", "en") == "Recipes"
        assert warnings.getvalue() == ""

    def test_no_lang_uses_fallback_silently(
        self, l10n: L10n, warnings: StringIO
    ) -> None:
        assert l10n.lookup("recipes", None) == "Recipes"
        assert warnings.getvalue() == ""

    def test_missing_lang_warns(self, l10n: L10n, warnings: StringIO) -> None:
        assert l10n.lookup("recipe_count", "de") == "{0} recipes"
        assert warnings.getvalue() == (
            "Missing lang de for key recipe_count, trying fallback...\n"
        )

    @pytest.mark.parametrize(
        "key, lang",
        [
            ("untranslated", "fr"),
            ("untranslated", None),
            ("no-such-key", "en"),
        ],
    )
    def test_missing_fallback(self, l10n: L10n, key: str, lang: str) -> None:
        with pytest.raises(MissingTranslationError):
            l10n.lookup(key, lang)


def test_builtin_strings_have_english() -> None:
    l10n = L10n("en")
    assert all("en" in translations for translations in l10n.strings.values())
    assert l10n.lookup("recipe_count", "de") == "{0} Rezepte"


def test_template_helper(l10n: L10n) -> None:
    env = Environment(
        loader=DictLoader(
            {
                "page.html": "{{ l10n('recipes') }}: {{ l10n('recipe_count', 3) }}",
            }
        )
    )
    env.globals["l10n"] = l10n.template_helper

    template = env.get_template("page.html")
    assert template.render(lang="en") == "Recipes: 3 recipes"
    assert template.render(lang="de") == "Rezepte: 3 recipes"
    assert template.render() == "Recipes: 3 recipes"
