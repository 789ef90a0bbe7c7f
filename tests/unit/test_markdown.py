"""Unit tests for the Markdown renderer."""

import pytest
import pytest_check as check

from aichatbot.ui.markdown import (
    Kind,
    Node,
    RenderedBlock,
    markdown_to_html,
    parse,
    parse_inline,
    render,
)


class TestParseBlocks:
    """Block-level element kinds."""

    @pytest.mark.parametrize(
        ("source", "kind"),
        [
            ("# Title", Kind.HEADING_1),
            ("## Title", Kind.HEADING_2),
            ("### Title", Kind.HEADING_3),
        ],
    )
    def test_headings(self, source: str, kind: Kind) -> None:
        (block,) = parse(source)

        check.equal(block.kind, kind)
        check.equal(block.children, (Node(Kind.TEXT, text="Title"),))

    @pytest.mark.parametrize(
        ("source", "text"),
        [
            ("# C#", "C#"),
            ("## Learning F#", "Learning F#"),
            ("## Title ##", "Title"),
            ("# Title #  ", "Title"),
        ],
    )
    def test_heading_closing_hashes(self, source: str, text: str) -> None:
        (block,) = parse(source)

        assert block.children == (Node(Kind.TEXT, text=text),)

    def test_deeper_heading_is_paragraph(self) -> None:
        (block,) = parse("#### Too deep")

        assert block.kind is Kind.PARAGRAPH

    def test_paragraphs_split_on_blank_lines(self) -> None:
        blocks = parse("first line\nsecond line\n\nnext paragraph")

        check.equal([b.kind for b in blocks], [Kind.PARAGRAPH, Kind.PARAGRAPH])
        check.equal(blocks[0].children[0].text, "first line\nsecond line")

    @pytest.mark.parametrize("source", ["---", "***", "* * *", "___"])
    def test_rules(self, source: str) -> None:
        assert parse(source) == (Node(Kind.RULE),)

    def test_unordered_list(self) -> None:
        (block,) = parse("- one\n* two\n+ three")

        check.equal(block.kind, Kind.LIST_UNORDERED)
        check.equal([item.kind for item in block.children], [Kind.LIST_ITEM] * 3)
        check.equal([item.children[0].text for item in block.children], ["one", "two", "three"])

    def test_ordered_list(self) -> None:
        (block,) = parse("1. first\n2. second")

        check.equal(block.kind, Kind.LIST_ORDERED)
        check.equal(len(block.children), 2)

    def test_quote_contains_parsed_blocks(self) -> None:
        (block,) = parse("> # Quoted\n> text")

        check.equal(block.kind, Kind.QUOTE)
        check.equal([b.kind for b in block.children], [Kind.HEADING_1, Kind.PARAGRAPH])

    def test_fenced_code_block(self) -> None:
        (block,) = parse("```python\nprint('hi')\n\nx = 1\n```")

        check.equal(block.kind, Kind.CODE_BLOCK)
        check.equal(block.language, "python")
        check.equal(block.text, "print('hi')\n\nx = 1")

    def test_unclosed_fence_runs_to_end(self) -> None:
        """Partially revealed code still renders as code."""
        (block,) = parse("```js\nconst a")

        assert block == Node(Kind.CODE_BLOCK, text="const a", language="js")

    def test_code_block_content_not_parsed(self) -> None:
        (block,) = parse("```\n# not a heading\n**not bold**\n```")

        assert block.text == "# not a heading\n**not bold**"

    def test_list_after_paragraph_starts_new_block(self) -> None:
        blocks = parse("Steps:\n1. do it")

        assert [b.kind for b in blocks] == [Kind.PARAGRAPH, Kind.LIST_ORDERED]


class TestParseInline:
    """Inline element kinds."""

    def test_strong_and_italic(self) -> None:
        nodes = parse_inline("a **b** and *c*")

        check.equal(
            [n.kind for n in nodes],
            [Kind.TEXT, Kind.STRONG, Kind.TEXT, Kind.ITALIC],
        )
        check.equal(nodes[1].children, (Node(Kind.TEXT, text="b"),))

    def test_underscore_forms(self) -> None:
        nodes = parse_inline("__bold__ _it_")

        assert [n.kind for n in nodes] == [Kind.STRONG, Kind.TEXT, Kind.ITALIC]

    def test_snake_case_is_plain_text(self) -> None:
        assert parse_inline("use my_var_name here") == (
            Node(Kind.TEXT, text="use my_var_name here"),
        )

    def test_inline_code_is_literal(self) -> None:
        nodes = parse_inline("run `**x**` now")

        assert nodes[1] == Node(Kind.CODE_INLINE, text="**x**")

    def test_nested_italic_in_strong(self) -> None:
        (node,) = parse_inline("**very *nested* text**")

        assert [c.kind for c in node.children] == [Kind.TEXT, Kind.ITALIC, Kind.TEXT]

    def test_stopped_marker_is_italic(self) -> None:
        nodes = parse_inline("Hello *(Stopped)*")

        assert nodes[-1] == Node(Kind.ITALIC, children=(Node(Kind.TEXT, text="(Stopped)"),))


class TestRender:
    """HTML output and block splitting."""

    def test_escapes_raw_html(self) -> None:
        result = markdown_to_html("<script>alert(1)</script>")

        check.is_not_in("<script>", result)
        check.is_in("&lt;script&gt;", result)

    def test_paragraph_markup(self) -> None:
        assert markdown_to_html("Hi **you**") == (
            '<p class="my-2 leading-relaxed">Hi '
            '<strong class="font-bold text-white">you</strong></p>'
        )

    def test_code_blocks_are_separate_blocks(self) -> None:
        blocks = render("Intro\n\n```py\nx = 1\n```\n\nOutro")

        check.equal([b.kind for b in blocks], ["html", "code", "html"])
        check.equal(blocks[1], RenderedBlock("code", "x = 1", "py"))

    def test_adjacent_html_blocks_merge(self) -> None:
        blocks = render("# Title\n\ntext\n\n---")

        check.equal(len(blocks), 1)
        check.is_in("<h1", blocks[0].content)
        check.is_in("<hr", blocks[0].content)

    def test_code_block_html_escapes_content(self) -> None:
        result = markdown_to_html("```\n<b>&</b>\n```")

        assert "<code>&lt;b&gt;&amp;&lt;/b&gt;</code>" in result

    def test_empty_text_renders_nothing(self) -> None:
        assert render("") == ()
        assert markdown_to_html("") == ""

    def test_rendering_is_deterministic(self) -> None:
        text = "# T\n\n- a\n- b\n\n> q\n\n```\ncode\n```\n\n1. x"

        assert render(text) == render(text)
        assert markdown_to_html(text) == markdown_to_html(text)
