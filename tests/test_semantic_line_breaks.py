import pytest
from loguru import logger

from md_styler.rules.line_breaks import (
    SemanticLineBreaksRule,
    inner_separators,
    is_heading,
    outer_separators,
    sort_phrases,
)

ARTICLE_BEFORE = """
# A Not-So-Capital Plan Part 2: The Future is Electric

Metro-North's M8 can run on catenary power (left[^M8-catenary-pantograph-citation]) or on either over- or under-running third rails (shoe seen at right[^M8-third-rail-shoe-citation]).

## Introduction

In major cities all across the globe, electric trains form the backbone of urban transportation. The benefits of electrification are simply too great to ignore. Electric trains accelerate faster, reduce overall journey times, and provide a higher-quality passenger experience than their diesel-powered counterparts, all while being cheaper to run and maintain. Electric trains are also a powerful tool for decarbonization: they can easily run on non-carbon fuel sources and produce no local pollution. It is rare that a single technology can reduce both pollution and costs while also actually improving service, but electric rail can accomplish just that. That is why the future of rail is electric around both the country and the world.
        """  # noqa: E501

ARTICLE_AFTER = """
# A Not-So-Capital Plan Part 2: The Future is Electric

Metro-North's M8 can run on catenary power (left[^M8-catenary-pantograph-citation])
or on either over- or under-running third rails (shoe seen at right[^M8-third-rail-shoe-citation]).

## Introduction

In major cities all across the globe, electric trains form the backbone of urban transportation.
The benefits of electrification are simply too great to ignore.
Electric trains accelerate faster, reduce overall journey times,
and provide a higher-quality passenger experience than their diesel-powered counterparts,
all while being cheaper to run and maintain.
Electric trains are also a powerful tool for decarbonization:
they can easily run on non-carbon fuel sources and produce no local pollution.
It is rare that a single technology can reduce both pollution and costs while also actually improving service,
but electric rail can accomplish just that.
That is why the future of rail is electric around both the country and the world.
        """


SENTENCE = "Alpha beta gamma delta epsilon."


@pytest.fixture
def rule():
    return SemanticLineBreaksRule()


class TestSemanticLineBreaksRule:
    """Test suite for SemanticLineBreaksRule."""

    def test_article(self, rule):
        """Test the full article: headings kept, sentences and clauses broken."""
        assert rule.rewrite(ARTICLE_BEFORE) == ARTICLE_AFTER

    def test_article_is_idempotent(self, rule):
        """Test that rewrapping the output again changes nothing."""
        assert rule.rewrite(ARTICLE_AFTER) == ARTICLE_AFTER

    def test_short_line_unchanged(self, rule):
        """Test that a line under the threshold is returned as-is."""
        text = "Short. Sentences, (here) because why not."
        assert rule.rewrite(text) == text

    def test_long_heading_unchanged(self, rule):
        """Test that headings are never split, however long."""
        heading = "## " + "Heading. With, many (separators) in order to split. " * 4
        assert rule.rewrite(heading) == heading

    def test_indented_heading_unchanged(self, rule):
        """Test that leading whitespace does not hide a heading."""
        heading = "   # " + "Sentence one. " * 10
        assert rule.rewrite(heading) == heading

    def test_unsplittable_line_kept_whole(self, rule):
        """Test that a long line without separators is emitted as-is."""
        line = "a" * 150
        assert rule.rewrite(line) == line

    def test_sentences_broken_before_clauses(self):
        """Test that sentence punctuation is preferred over commas."""
        rule = SemanticLineBreaksRule(max_line_length=40)
        text = "First one, with a comma. Second one, with another."
        assert rule.rewrite(text) == "First one, with a comma.\nSecond one, with another."

    def test_clause_breaks_for_long_sentence(self):
        """Test that commas are used when a sentence is still too long."""
        rule = SemanticLineBreaksRule(max_line_length=30)
        text = "The first clause is here, the second clause is here, and the third."
        expected = "The first clause is here,\nthe second clause is here,\nand the third."
        assert rule.rewrite(text) == expected

    def test_break_before_opening_bracket(self):
        """Test that opening brackets start the new line."""
        rule = SemanticLineBreaksRule(max_line_length=30)
        text = "Some text that runs long enough [with a bracketed aside]"
        assert rule.rewrite(text) == "Some text that runs long enough\n[with a bracketed aside]"

    def test_break_before_conjunction_phrase(self):
        """Test that a multi-word conjunction phrase starts the new line."""
        line = "x" * 60 + " in order to " + "y" * 50
        assert SemanticLineBreaksRule().rewrite(line) == "x" * 60 + "\nin order to " + "y" * 50

    def test_conjunction_must_be_whole_word(self):
        """Test that a phrase inside a longer word is not a break point."""
        line = "x" * 60 + " becausey " + "y" * 50
        assert SemanticLineBreaksRule().rewrite(line) == line

    def test_conjunction_is_case_sensitive(self):
        """Test that capitalized phrases are not break points."""
        line = "x" * 60 + " Because " + "y" * 50
        assert SemanticLineBreaksRule().rewrite(line) == line

    def test_spaces_at_break_are_consumed(self):
        """Test that the run of spaces at a break point is removed."""
        rule = SemanticLineBreaksRule(max_line_length=20)
        text = "One sentence here.    Two sentence here."
        assert rule.rewrite(text) == "One sentence here.\nTwo sentence here."

    def test_line_at_threshold_is_rewrapped(self):
        """Test that a line exactly at the threshold is rewrapped."""
        rule = SemanticLineBreaksRule(max_line_length=20)
        text = "Aaaaaaaa. Bbbbbbbbb."
        assert len(text) == 20
        assert rule.rewrite(text) == "Aaaaaaaa.\nBbbbbbbbb."

    def test_line_below_threshold_is_not_rewrapped(self):
        """Test that a line one character under the threshold is untouched."""
        rule = SemanticLineBreaksRule(max_line_length=20)
        text = "Aaaaaaa. Bbbbbbbbb."
        assert len(text) == 19
        assert rule.rewrite(text) == text

    def test_blank_lines_and_trailing_newline_preserved(self, rule):
        """Test that blank lines and the final newline pass through."""
        text = "First paragraph.\n\n\nSecond paragraph.\n"
        assert rule.rewrite(text) == text

    def test_each_line_rewrapped_independently(self):
        """Test that existing line breaks are never joined."""
        rule = SemanticLineBreaksRule(max_line_length=100)
        text = "a.\nb."
        assert rule.rewrite(text) == text

    def test_output_lines_under_threshold_when_splittable(self, rule):
        """Test that every produced line fits unless it has no break point."""
        for line in rule.rewrite(ARTICLE_BEFORE).split("\n"):
            if len(line) >= rule.max_line_length:
                assert line.startswith("It is rare that")

    def test_invalid_max_line_length(self):
        """Test that a non-positive threshold is rejected."""
        with pytest.raises(ValueError, match="max_line_length"):
            SemanticLineBreaksRule(max_line_length=0)

    def test_indentation_kept_before_opening_bracket(self, rule):
        """Test that an indented line starting with a bracket keeps its indentation."""
        words = " ".join(["word"] * 30)
        line = f"    (see the appendix) {words}"
        assert rule.rewrite(line) == f"    (see the appendix)\n{words}"

    def test_indentation_kept_before_conjunction_phrase(self, rule):
        """Test that leading spaces before a phrase are not a break point."""
        line = "  because " + "x" * 120
        assert rule.rewrite(line) == line

    def test_crlf_line_endings_kept(self, rule):
        """Test that lines split from a CRLF line all end in CRLF."""
        three = " ".join([SENTENCE] * 3)
        text = " ".join([SENTENCE] * 6) + "\r\n"
        assert rule.rewrite(text) == f"{three}\r\n{three}\r\n"

    def test_carriage_return_not_counted(self):
        """Test that the carriage return is not part of the line length."""
        three = " ".join([SENTENCE] * 3)
        assert len(three) == 95
        rule = SemanticLineBreaksRule(max_line_length=96)
        assert rule.rewrite(f"{three}\r\n") == f"{three}\r\n"

    def test_tier_name_logged(self):
        """Test that each rewrap logs the separator tier it broke at."""
        messages = []
        logger.add(messages.append, level="DEBUG", format="{message}")
        SemanticLineBreaksRule(max_line_length=20).rewrite("One sentence here. Two sentence here.")
        assert any("into 2 at outer separators" in message for message in messages)
        assert not any("inner separators" in message for message in messages)


class TestRejoin:
    """Test suite for the greedy rejoin pass."""

    def test_joins_while_under_threshold(self):
        """Test that fragments are joined with one space while they fit."""
        rule = SemanticLineBreaksRule(max_line_length=10)
        assert rule.rejoin(["aaaa", "bbbb", "cccc"]) == ["aaaa bbbb", "cccc"]

    def test_joining_space_counts_toward_length(self):
        """Test that the joining space is included in the length check."""
        rule = SemanticLineBreaksRule(max_line_length=10)
        assert rule.rejoin(["aaaa", "bbbbb"]) == ["aaaa", "bbbbb"]

    def test_long_fragment_kept_whole(self):
        """Test that an oversized fragment gets its own line."""
        rule = SemanticLineBreaksRule(max_line_length=10)
        assert rule.rejoin(["aa", "b" * 20, "cc"]) == ["aa", "b" * 20, "cc"]

    def test_order_preserved(self):
        """Test that rejoining never reorders fragments."""
        rule = SemanticLineBreaksRule(max_line_length=8)
        fragments = ["1", "22", "333", "4444", "55555"]
        rejoined = rule.rejoin(fragments)
        assert " ".join(rejoined).split(" ") == fragments


class TestSeparators:
    """Test suite for the separator tiers."""

    def test_outer_breaks_after_sentence_punctuation(self):
        """Test every sentence-ending punctuation mark."""
        line = "One. Two! Three? Four; Five: Six"
        assert outer_separators().insert_breaks(line) == ["One.", "Two!", "Three?", "Four;", "Five:", "Six"]

    def test_outer_requires_following_space(self):
        """Test that punctuation inside a token is not a break point."""
        assert outer_separators().insert_breaks("e.g. 3.14 and a:b") == ["e.g.", "3.14 and a:b"]

    def test_inner_closing_and_opening(self):
        """Test break-after closing and break-before opening punctuation."""
        line = "a, b) c] d (e [f"
        assert inner_separators().insert_breaks(line) == ["a,", "b)", "c]", "d", "(e", "[f"]

    def test_longest_phrase_matched(self):
        """Test that the longer of two overlapping phrases is matched as a unit."""
        separators = inner_separators(["in", "in order to"])
        match = separators.pattern.search("stay in order to win")
        assert match.group("after") == "in order to"

    def test_sort_phrases_by_word_count(self):
        """Test that phrases with more words come first, ties keep their order."""
        phrases = ["because", "rather than", "of how", "in order to"]
        assert sort_phrases(phrases) == ["in order to", "rather than", "of how", "because"]

    def test_no_phrases(self):
        """Test that the inner tier works with an empty phrase list."""
        assert inner_separators([]).insert_breaks("a because (b") == ["a because", "(b"]


class TestIsHeading:
    """Test suite for heading detection."""

    @pytest.mark.parametrize("line", ["# Title", "### Sub", "   # Indented", "\t#Tabbed"])
    def test_headings(self, line):
        assert is_heading(line)

    @pytest.mark.parametrize("line", ["Title #1", "", "    ", "\\# escaped"])
    def test_not_headings(self, line):
        assert not is_heading(line)
