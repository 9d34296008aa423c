"""Tests for doccrawl.services.converter."""

from doccrawl.services.converter import convert, to_markdown

_LONG_PARAGRAPH = (
    "<p>Apex is a strongly typed, object-oriented programming language that "
    "executes flow and transaction control statements on the platform server.</p>"
)


class TestCodeBlocks:
    def test_python_code_block_is_fenced_with_language(self):
        html = '<pre><code class="language-python">print(1)</code></pre>'
        assert to_markdown(html) == "```python\nprint(1)\n```"

    def test_language_found_among_other_classes(self):
        html = '<pre><code class="hljs language-java copyable">int x = 1;</code></pre>'
        assert to_markdown(html).startswith("```java\n")

    def test_missing_language_gives_bare_fence(self):
        html = "<pre><code>ls -la</code></pre>"
        assert to_markdown(html) == "```\nls -la\n```"

    def test_indentation_is_preserved(self):
        html = "<pre><code>def f():\n    return 1\n</code></pre>"
        result = to_markdown(html)
        assert "def f():\n    return 1\n```" in result

    def test_code_text_is_not_markdown_escaped(self):
        html = '<pre><code class="language-python">x = a * b  # note</code></pre>'
        assert "x = a * b  # note" in to_markdown(html)

    def test_pre_without_code_child_uses_pre_text(self):
        html = "<pre>plain preformatted</pre>"
        assert to_markdown(html) == "```\nplain preformatted\n```"


class TestSuppressedElements:
    def test_script_style_and_noscript_are_dropped(self):
        html = (
            "<p>Visible text.</p>"
            "<script>alert('x')</script>"
            "<style>p { color: red; }</style>"
            "<noscript>Enable JavaScript</noscript>"
        )
        result = to_markdown(html)
        assert "Visible text." in result
        assert "alert" not in result
        assert "color" not in result
        assert "Enable JavaScript" not in result


class TestTables:
    def test_pipe_in_cell_is_escaped_and_single_separator(self):
        html = (
            "<table>"
            "<tr><th>A|B</th><th>C</th></tr>"
            "<tr><td>1</td><td>2</td></tr>"
            "</table>"
        )
        lines = to_markdown(html).splitlines()
        assert lines == [
            "| A\\|B | C |",
            "| --- | --- |",
            "| 1 | 2 |",
        ]

    def test_separator_follows_first_row_only(self):
        html = (
            "<table><thead><tr><th>Name</th></tr></thead>"
            "<tbody><tr><td>alpha</td></tr><tr><td>beta</td></tr></tbody></table>"
        )
        lines = to_markdown(html).splitlines()
        assert lines.count("| --- |") == 1
        assert lines.index("| --- |") == 1

    def test_cell_text_is_trimmed(self):
        html = "<table><tr><td>  padded  </td></tr></table>"
        assert to_markdown(html).splitlines()[0] == "| padded |"

    def test_table_without_rows_renders_nothing(self):
        assert to_markdown("<p>Before</p><table></table>") == "Before"


class TestGeneralMarkdown:
    def test_headings_are_atx(self):
        assert to_markdown("<h2>Setup</h2>") == "## Setup"

    def test_bullets_use_dashes(self):
        assert to_markdown("<ul><li>One</li><li>Two</li></ul>") == "- One\n- Two"


class TestConvert:
    def test_none_fragment(self):
        assert convert(None) is None

    def test_empty_fragment(self):
        assert convert("") is None

    def test_short_output_is_rejected(self):
        assert convert("<p>Too short.</p>") is None

    def test_long_output_is_returned(self):
        result = convert("<h1>Apex</h1>" + _LONG_PARAGRAPH)
        assert result is not None
        assert len(result) >= 100
        assert result.startswith("# Apex")
