"""
Unit tests for PolishPal change analysis.
"""

import pytest
from polishpal.core import (
    Annotation,
    ChangeAnalyzer,
    analyze_changes,
    classify,
    is_likely_spelling,
    summarize,
    tokenize,
)


class TestTokenize:
    """Test cases for whitespace tokenization."""

    def test_lowercases_and_splits_on_whitespace_runs(self):
        assert tokenize("Hello   World\tagain\n") == ['hello', 'world', 'again']

    def test_empty_and_blank_text(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []

    def test_punctuation_stays_attached(self):
        assert tokenize("again. Yes,") == ['again.', 'yes,']


class TestIsLikelySpelling:
    """Test cases for the prefix-similarity spelling heuristic."""

    def test_one_letter_substitution(self):
        # 'a' and 't' match, 'c' vs 'b' differs: 2/3 > 0.6
        assert is_likely_spelling("cat", "bat") is True

    def test_length_difference_over_two(self):
        assert is_likely_spelling("a", "abcdef") is False

    def test_missing_trailing_letter(self):
        assert is_likely_spelling("mistak", "mistake") is True

    def test_ratio_must_exceed_threshold(self):
        # w, o match; l/u and d/l do not: 2/4 = 0.5
        assert is_likely_spelling("wold", "would") is False

    def test_empty_words(self):
        assert is_likely_spelling("", "word") is False
        assert is_likely_spelling("word", "") is False

    def test_alignment_is_not_shifted(self):
        # An inserted first letter shifts every character: no positional matches
        assert is_likely_spelling("rain", "train") is False


class TestClassify:
    """Test cases for the category decision order."""

    def test_missing_word(self):
        assert classify("", "extra") == ('missing_word', 'Add "extra"')

    def test_extra_word(self):
        assert classify("extra", "") == ('extra_word', 'Remove "extra"')

    def test_spelling(self):
        assert classify("cat", "bat") == ('spelling', '"cat" → "bat"')

    def test_grammar_is_the_default(self):
        assert classify("a", "abcdef") == ('grammar', '"a" → "abcdef"')

    def test_spelling_rule_shadows_capitalization_rule(self):
        # 'i' vs 'i' is a 1/1 positional match, so the spelling rule wins first
        assert classify("i", "i") == ('spelling', '"i" → "i"')


class TestPositionalAnalysis:
    """Test cases for the default index-by-index comparison."""

    def test_identical_text_has_no_changes(self):
        text = "The quick brown fox jumps over the lazy dog."
        assert analyze_changes(text, text) == []

    def test_case_only_differences_are_ignored(self):
        assert analyze_changes("i am here", "I am Here") == []

    def test_whitespace_differences_are_ignored(self):
        assert analyze_changes("  hello   world ", "hello world") == []

    def test_appended_word(self):
        result = analyze_changes("hello world", "hello world extra")

        assert result == [
            Annotation(position=2, original='', corrected='extra',
                       category='missing_word', suggestion='Add "extra"')
        ]

    def test_removed_word(self):
        result = analyze_changes("hello world extra", "hello world")

        assert len(result) == 1
        assert result[0].position == 2
        assert result[0].category == 'extra_word'
        assert result[0].suggestion == 'Remove "extra"'
        assert result[0].corrected == ''

    def test_long_replacement_is_grammar(self):
        result = analyze_changes("a", "abcdef")

        assert len(result) == 1
        assert result[0].category == 'grammar'

    def test_mock_correction_example(self):
        original = "i wold no make same again mistak ."
        corrected = "I would not make the same mistake again."

        result = analyze_changes(original, corrected)
        by_position = {a.position: a for a in result}

        assert by_position[6].original == 'mistak'
        assert by_position[6].corrected == 'mistake'
        assert by_position[6].category == 'spelling'
        assert by_position[2].category == 'spelling'  # no -> not
        assert by_position[1].original == 'wold'
        assert by_position[1].category == 'grammar'  # 2/4 positional overlap
        assert 0 not in by_position  # i -> I is a case-only change
        assert [a.position for a in result] == sorted(a.position for a in result)

    def test_inserted_word_cascades(self):
        result = analyze_changes("the cat sat", "the big cat sat")

        assert [(a.position, a.category) for a in result] == [
            (1, 'grammar'),
            (2, 'spelling'),
            (3, 'missing_word'),
        ]

    def test_annotation_count_is_bounded(self):
        pairs = [
            ("one two three", "four five"),
            ("", "a b c"),
            ("a b c d", ""),
            ("x y", "y x z"),
        ]
        for original, corrected in pairs:
            result = analyze_changes(original, corrected)
            assert len(result) <= max(len(tokenize(original)), len(tokenize(corrected)))

    def test_empty_inputs(self):
        assert analyze_changes("", "") == []
        assert analyze_changes("", "hi")[0].category == 'missing_word'
        assert analyze_changes("hi", "")[0].category == 'extra_word'

    def test_repeated_calls_are_identical(self):
        analyzer = ChangeAnalyzer()
        first = analyzer.analyze("teh cat sat", "the cats sat down")
        second = analyzer.analyze("teh cat sat", "the cats sat down")
        assert first == second


class TestSequenceAnalysis:
    """Test cases for the opt-in sequence alignment."""

    def test_inserted_word_is_a_single_change(self):
        result = analyze_changes("the cat sat", "the big cat sat", alignment='sequence')

        assert result == [
            Annotation(position=1, original='', corrected='big',
                       category='missing_word', suggestion='Add "big"')
        ]

    def test_deleted_word_is_a_single_change(self):
        result = analyze_changes("the big cat", "the cat", alignment='sequence')

        assert len(result) == 1
        assert result[0].category == 'extra_word'
        assert result[0].position == 1

    def test_replacement_uses_same_classification(self):
        result = analyze_changes("a mistak here", "a mistake here", alignment='sequence')

        assert len(result) == 1
        assert result[0].category == 'spelling'
        assert result[0].suggestion == '"mistak" → "mistake"'

    def test_positions_ascend_across_inserts_and_deletes(self):
        result = analyze_changes("a b", "n1 n2 n3 a", alignment='sequence')

        assert [(a.position, a.category) for a in result] == [
            (0, 'missing_word'),
            (1, 'missing_word'),
            (2, 'missing_word'),
            (4, 'extra_word'),
        ]

    def test_positions_use_corrected_index_space(self):
        pairs = [
            ("x a y z", "a w"),
            ("one two three four", "zero one four five six"),
            ("a b c d e", "b d f"),
        ]
        for original, corrected in pairs:
            positions = [a.position for a in analyze_changes(original, corrected, alignment='sequence')]
            assert positions == sorted(positions)
            assert all(0 <= p <= len(tokenize(corrected)) for p in positions)

    def test_identical_text_has_no_changes(self):
        assert analyze_changes("Same text", "same TEXT", alignment='sequence') == []

    def test_unknown_alignment_rejected(self):
        with pytest.raises(ValueError):
            ChangeAnalyzer(alignment='lcs')


class TestAnnotation:
    """Test cases for annotation serialization and summaries."""

    def test_to_dict_uses_type_key(self):
        annotation = Annotation(position=0, original='wold', corrected='would',
                                category='grammar', suggestion='"wold" → "would"')

        assert annotation.to_dict() == {
            'position': 0,
            'original': 'wold',
            'corrected': 'would',
            'type': 'grammar',
            'suggestion': '"wold" → "would"'
        }
        assert Annotation.from_dict(annotation.to_dict()) == annotation

    def test_summarize_counts_categories(self):
        result = analyze_changes("the cat sat", "the big cat sat")
        summary = summarize(result)

        assert summary['total_changes'] == 3
        assert summary['grammar'] == 1
        assert summary['spelling'] == 1
        assert summary['missing_word'] == 1
        assert summary['extra_word'] == 0


if __name__ == '__main__':
    pytest.main([__file__])
