import pytest

from textwrap import dedent

from jinja2 import DictLoader, Environment, StrictUndefined

from rumtopf.exceptions import AnnotationError, FragmentTemplateError

from rumtopf.markdown import compile_markdown
from rumtopf.static_site.templates import make_environment


@pytest.fixture
def env() -> Environment:
    return Environment(
        loader=DictLoader(
            {
                "servings.html": '<input value="{{ servings }}">',
                "scaling.html": '<span data-base="{{ base }}"></span>',
            }
        ),
        autoescape=True,
        undefined=StrictUndefined,
    )


class TestCompileMarkdown:
    @pytest.mark.parametrize(
        "markdown, exp",
        [
            # Plain markdown
            ("", ""),
            ("Hello", "<p>Hello</p>\n"),
            ("Fish & chips", "<p>Fish &amp; chips</p>\n"),
            # Annotations
            (
                "Add {{200}} g of flour",
                '<p>Add <span data-base="200.0"></span> g of flour</p>\n',
            ),
            (
                "Makes {{4 servings}}.",
                '<p>Makes <input value="4.0">.</p>\n',
            ),
            # Within other inline markup
            (
                "*{{2}} eggs*",
                '<p><em><span data-base="2.0"></span> eggs</em></p>\n',
            ),
            (
                "[{{2}} eggs](eggs.html)",
                '<p><a href="eggs.html"><span data-base="2.0"></span> eggs</a></p>\n',
            ),
            # Within inline code
            (
                "Use `{{2}} <tsp>`",
                '<p>Use <code><span data-base="2.0"></span> &lt;tsp&gt;</code></p>\n',
            ),
            # Within code blocks
            (
                "```\n{{2}} < 3\n```",
                '<pre><code><span data-base="2.0"></span> &lt; 3\n</code></pre>\n',
            ),
            (
                "```text\n{{2}}\n```",
                (
                    '<pre><code class="language-text">'
                    '<span data-base="2.0"></span>\n</code></pre>\n'
                ),
            ),
            (
                "    {{4 servings}}\n",
                '<pre><code><input value="4.0">\n</code></pre>\n',
            ),
            # Backslash escapes prevent substitution
            (
                r"\{\{2}}",
                "<p>{{2}}</p>\n",
            ),
        ],
    )
    def test_body(self, env: Environment, markdown: str, exp: str) -> None:
        parsed = compile_markdown(markdown, env)
        assert parsed.html == exp
        assert parsed.errors == []

    @pytest.mark.parametrize(
        "markdown, exp_title",
        [
            # No title
            ("", None),
            ("Hello", None),
            ("## Not a title", None),
            # ATX and setext
            ("# Borscht", "Borscht"),
            ("Borscht\n=======", "Borscht"),
            # Only level-1 headings
            ("## Sub\n\n# Main", "Main"),
            # Only the first level-1 heading
            ("# One\n\n# Two", "One"),
            # Titles are not escaped
            ("# Fish & Chips", "Fish & Chips"),
            ("# Fish &amp; Chips", "Fish & Chips"),
            # Titles include inline markup text and code
            ("# *Very* hot `chilli`", "Very hot chilli"),
            # Titles are not substituted
            ("# Borscht {{4 servings}}", "Borscht {{4 servings}}"),
            ("# `{{2}}` eggs", "{{2}} eggs"),
        ],
    )
    def test_title(self, env: Environment, markdown: str, exp_title: str) -> None:
        assert compile_markdown(markdown, env).title == exp_title

    def test_title_heading_is_substituted(self, env: Environment) -> None:
        parsed = compile_markdown(
            dedent(
                """
                # Borscht {{4 servings}}

                Boil {{3}} beetroots.
                """
            ),
            env,
        )
        assert parsed.title == "Borscht {{4 servings}}"
        assert parsed.html == (
            '<h1>Borscht <input value="4.0"></h1>\n'
            '<p>Boil <span data-base="3.0"></span> beetroots.</p>\n'
        )

    def test_text_after_title_not_captured(self, env: Environment) -> None:
        parsed = compile_markdown("# Soup\n\nNot part of the title", env)
        assert parsed.title == "Soup"

    def test_malformed_annotation(self, env: Environment) -> None:
        parsed = compile_markdown("A {{notanumber}} and {{2}}", env)
        assert parsed.html == (
            '<p>A {{notanumber}} and <span data-base="2.0"></span></p>\n'
        )
        assert len(parsed.errors) == 1
        assert isinstance(parsed.errors[0], AnnotationError)

    def test_errors_in_document_order(self, env: Environment) -> None:
        parsed = compile_markdown("{{a}}\n\n`{{b}}`\n\n{{c}}", env)
        assert [str(e).split()[2] for e in parsed.errors] == [
            "{{a}}",
            "{{b}}",
            "{{c}}",
        ]

    def test_missing_fragments_falls_back(self) -> None:
        env = Environment(loader=DictLoader({}), undefined=StrictUndefined)
        parsed = compile_markdown(
            "# Pie\n\nA & {{2}} and `{{3}}`\n\n```\n{{4}}\n```\n", env
        )
        assert parsed.title == "Pie"
        assert parsed.html == (
            "<h1>Pie</h1>\n<p>A &amp; {{2}} and <code>{{3}}</code></p>\n"
            "<pre><code>{{4}}\n</code></pre>\n"
        )
        assert len(parsed.errors) == 3
        assert all(isinstance(e, FragmentTemplateError) for e in parsed.errors)

    def test_unrepresentable_numbers_with_builtin_templates(self) -> None:
        parsed = compile_markdown(
            "Add {{1e400}} g to {{1e400 servings}}, then {{2}} g.\n\n"
            "```\n{{-1e400}}\n```\n",
            make_environment(),
        )
        assert "{{1e400}}" in parsed.html
        assert "{{1e400 servings}}" in parsed.html
        assert "{{-1e400}}" in parsed.html
        assert 'class="scaling" data-base="2.0"' in parsed.html
        assert len(parsed.errors) == 3
        assert all(isinstance(e, AnnotationError) for e in parsed.errors)
