"""
tests/test_renderer.py -- Tests for the ConTeXt renderer

Covers:
  - render_node(): the literal markup of every node kind
  - Dispatch table completeness
  - render_slide(): frame markers, empty slides
  - render_document(): prologue/epilogue placement
"""

from __future__ import annotations

import logging

import pytest

from ctxslides.config import ConverterConfig
from ctxslides.pandoc.models import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Emph,
    Header,
    HorizontalRule,
    NodeKind,
    Paragraph,
    PlainItem,
    RawBlock,
    RawInline,
    Slide,
    Space,
    Str,
    Strong,
)
from ctxslides.renderer.context_renderer import (
    _RENDERERS,
    render_document,
    render_node,
    render_slide,
)
from ctxslides.renderer.templates import EPILOGUE, PROLOGUE


@pytest.fixture
def words():
    return [Str(text="two"), Space(), Str(text="words")]


# ── Leaves ───────────────────────────────────────────────────────────


class TestLeaves:
    def test_str_verbatim(self):
        assert render_node(Str(text="a{b}c")) == "a{b}c"

    def test_space(self):
        assert render_node(Space()) == " "

    def test_raw_inline_verbatim(self):
        assert render_node(RawInline(format="tex", raw="\\crlf")) == "\\crlf"

    def test_raw_block_verbatim(self):
        assert render_node(RawBlock(format="context", raw="\\page")) == "\\page"

    def test_raw_block_logs_diagnostic(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="ctxslides.renderer.context_renderer"):
            render_node(RawBlock(raw="\\page"))
        assert "RawBlock" in caplog.text

    def test_horizontal_rule_renders_nothing(self):
        assert render_node(HorizontalRule()) == ""


# ── Inline composites ────────────────────────────────────────────────


class TestInlines:
    def test_strong(self):
        assert render_node(Strong(contents=[Str(text="x")])) == "{\\bf x}"

    def test_emph(self, words):
        assert render_node(Emph(contents=words)) == "{\\emphasis two words}"

    def test_nested(self):
        node = Strong(contents=[Emph(contents=[Str(text="x")])])
        assert render_node(node) == "{\\bf {\\emphasis x}}"


# ── Blocks ───────────────────────────────────────────────────────────


class TestBlocks:
    def test_paragraph(self, words):
        assert render_node(Paragraph(contents=words)) == "\n\ntwo words"

    def test_block_quote_strips_children(self):
        node = BlockQuote(
            contents=[
                Paragraph(contents=[Str(text="first")]),
                Paragraph(contents=[Str(text="second")]),
            ]
        )
        assert render_node(node) == "{\\italic\\quotation{ firstsecond}}"

    def test_plain_item(self, words):
        assert render_node(PlainItem(contents=words)) == "\\item two words"

    def test_bullet_list(self):
        node = BulletList(
            items=[
                PlainItem(contents=[Str(text="a")]),
                PlainItem(contents=[Strong(contents=[Str(text="b")])]),
            ]
        )
        assert render_node(node) == "\\startitemize\n\\item a\n\\item {\\bf b}\n\\stopitemize"

    def test_header_level_one(self, words):
        assert render_node(Header(level=1, contents=words)) == "\\subject{two words}"

    @pytest.mark.parametrize("level", [2, 3, 6])
    def test_header_deeper_levels(self, level):
        node = Header(level=level, contents=[Str(text="h")])
        assert render_node(node) == "\\subsubject{h}"

    def test_code_block_upper_cases_language(self):
        node = CodeBlock(language="ruby", code="puts 1\n  puts 2\n")
        assert render_node(node) == "\\startRUBY\nputs 1\n  puts 2\n\n\\stopRUBY"

    def test_code_block_without_language(self):
        node = CodeBlock(code="plain text")
        assert render_node(node) == "\\starttyping\nplain text\n\\stoptyping"


# ── Dispatch ─────────────────────────────────────────────────────────


class TestDispatch:
    def test_every_kind_has_a_renderer(self):
        assert set(_RENDERERS) == set(NodeKind)

    def test_render_is_repeatable(self, words):
        node = Paragraph(contents=words)
        assert render_node(node) == render_node(node)


# ── Slides & documents ───────────────────────────────────────────────


class TestSlides:
    def test_members_joined_by_newline(self):
        slide = Slide(tokens=[Header(level=1, contents=[Str(text="T")]), Paragraph(contents=[Str(text="p")])])
        assert render_slide(slide) == (
            "\\startstandardmakeup[align=middle]\n"
            "\\subject{T}\n"
            "\n\np\n"
            "\\stopstandardmakeup"
        )

    def test_empty_slide_is_blank_frame(self):
        assert render_slide(Slide()) == "\\startstandardmakeup[align=middle]\n\n\\stopstandardmakeup"


class TestDocument:
    def test_prologue_and_epilogue(self):
        out = render_document([Slide(tokens=[Str(text="x")])])
        assert out.startswith(PROLOGUE)
        assert out.endswith(EPILOGUE)
        assert out == PROLOGUE + "\\startstandardmakeup[align=middle]\nx\n\\stopstandardmakeup\n" + EPILOGUE

    def test_no_slides(self):
        assert render_document([]) == PROLOGUE + EPILOGUE

    def test_custom_boilerplate(self):
        config = ConverterConfig(prologue="BEGIN\n", epilogue="END\n")
        out = render_document([Slide(), Slide()], config)
        frame = "\\startstandardmakeup[align=middle]\n\n\\stopstandardmakeup\n"
        assert out == "BEGIN\n" + frame + frame + "END\n"

    def test_prologue_opens_text(self):
        assert PROLOGUE.rstrip().endswith("\\startcolor[white]")
        assert "\\starttext" in PROLOGUE
        assert EPILOGUE == "\\stopcolor\n\\stoptext\n"
