"""
Core PolishPal change analysis.

Compares an original text with its corrected version word by word and
labels every mismatch with a best-guess error category.
"""

import re
from difflib import SequenceMatcher
from typing import List, Dict, Any, Tuple
from dataclasses import dataclass

# Error categories
MISSING_WORD = 'missing_word'
EXTRA_WORD = 'extra_word'
SPELLING = 'spelling'
CAPITALIZATION = 'capitalization'
GRAMMAR = 'grammar'
UNKNOWN = 'unknown'

CATEGORIES = (MISSING_WORD, EXTRA_WORD, SPELLING, CAPITALIZATION, GRAMMAR, UNKNOWN)

POSITIONAL = 'positional'
SEQUENCE = 'sequence'
ALIGNMENT_MODES = (POSITIONAL, SEQUENCE)

_WHITESPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class Annotation:
    """Represents a single word-level change between original and corrected text."""
    position: int
    original: str  # '' when the corrected text has an extra word here
    corrected: str  # '' when the original text has an extra word here
    category: str
    suggestion: str

    def to_dict(self):
        """Convert annotation to dictionary for JSON serialization."""
        return {
            'position': self.position,
            'original': self.original,
            'corrected': self.corrected,
            'type': self.category,
            'suggestion': self.suggestion
        }

    @classmethod
    def from_dict(cls, data):
        """Create annotation from dictionary."""
        return cls(
            position=int(data['position']),
            original=data['original'],
            corrected=data['corrected'],
            category=data['type'],
            suggestion=data['suggestion']
        )


def tokenize(text: str) -> List[str]:
    """Lower-case text and split it on whitespace runs, dropping empty tokens."""
    return [token for token in _WHITESPACE.split(text.lower()) if token]


def is_likely_spelling(word1: str, word2: str) -> bool:
    """
    Guess whether two differing words are a misspelling of each other.

    Words qualify when their lengths differ by at most two and more than 60%
    of the characters of the shorter word match position-for-position from
    the start of both words.
    """
    if not word1 or not word2:
        return False

    if abs(len(word1) - len(word2)) > 2:
        return False

    min_length = min(len(word1), len(word2))
    common_chars = sum(1 for i in range(min_length) if word1[i] == word2[i])

    return common_chars / min_length > 0.6


def classify(original_word: str, corrected_word: str) -> Tuple[str, str]:
    """
    Return (category, suggestion) for a mismatched pair of tokens.

    Rules are checked in a fixed order and the first one that applies wins.
    """
    if original_word == '' and corrected_word != '':
        return MISSING_WORD, f'Add "{corrected_word}"'
    if original_word != '' and corrected_word == '':
        return EXTRA_WORD, f'Remove "{original_word}"'
    if is_likely_spelling(original_word, corrected_word):
        return SPELLING, f'"{original_word}" → "{corrected_word}"'
    # Never fires: analyze() skips equal tokens, and 'i' vs 'i' already
    # matches the spelling rule above (1/1 > 0.6).
    if original_word == 'i' and corrected_word == 'i':
        return CAPITALIZATION, 'Capitalize "I"'
    return GRAMMAR, f'"{original_word}" → "{corrected_word}"'


def _annotate(position: int, original_word: str, corrected_word: str) -> Annotation:
    category, suggestion = classify(original_word, corrected_word)
    return Annotation(
        position=position,
        original=original_word,
        corrected=corrected_word,
        category=category,
        suggestion=suggestion
    )


class ChangeAnalyzer:
    """
    Stateless word-level diff between an original and a corrected text.

    The default ``positional`` alignment compares tokens index by index. It
    never resynchronizes, so one inserted or deleted word turns every later
    position into a mismatch. ``sequence`` alignment matches tokens with an
    edit-distance style matcher instead and reports insertions and deletions
    as single annotations.
    """

    def __init__(self, alignment: str = POSITIONAL):
        if alignment not in ALIGNMENT_MODES:
            raise ValueError(
                f"Unsupported alignment '{alignment}'. Choose from: {', '.join(ALIGNMENT_MODES)}"
            )
        self.alignment = alignment

    def analyze(self, original: str, corrected: str) -> List[Annotation]:
        """
        Analyze changes between original and corrected text.

        Args:
            original: Text as submitted
            corrected: Text returned by the correction provider

        Returns:
            Annotations in ascending position order, empty when nothing changed
        """
        original_words = tokenize(original)
        corrected_words = tokenize(corrected)

        if self.alignment == SEQUENCE:
            return self._sequence_diff(original_words, corrected_words)
        return self._positional_diff(original_words, corrected_words)

    def _positional_diff(self, original_words: List[str], corrected_words: List[str]) -> List[Annotation]:
        analysis = []
        max_length = max(len(original_words), len(corrected_words))

        for i in range(max_length):
            original_word = original_words[i] if i < len(original_words) else ''
            corrected_word = corrected_words[i] if i < len(corrected_words) else ''

            if original_word == corrected_word:
                continue

            analysis.append(_annotate(i, original_word, corrected_word))

        return analysis

    def _sequence_diff(self, original_words: List[str], corrected_words: List[str]) -> List[Annotation]:
        analysis = []
        matcher = SequenceMatcher(a=original_words, b=corrected_words, autojunk=False)

        # Positions index the corrected sequence; removed words sit at the
        # index where they would have been.
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                continue

            if tag == 'delete':
                for i in range(i1, i2):
                    analysis.append(_annotate(j1, original_words[i], ''))
            elif tag == 'insert':
                for j in range(j1, j2):
                    analysis.append(_annotate(j, '', corrected_words[j]))
            else:
                # replace: pair tokens one-to-one, leftovers are additions or removals
                span = max(i2 - i1, j2 - j1)
                for k in range(span):
                    original_word = original_words[i1 + k] if i1 + k < i2 else ''
                    corrected_word = corrected_words[j1 + k] if j1 + k < j2 else ''
                    position = min(j1 + k, j2)
                    analysis.append(_annotate(position, original_word, corrected_word))

        return analysis


def analyze_changes(original: str, corrected: str, alignment: str = POSITIONAL) -> List[Annotation]:
    """Convenience wrapper around ChangeAnalyzer.analyze."""
    return ChangeAnalyzer(alignment=alignment).analyze(original, corrected)


def summarize(annotations: List[Annotation]) -> Dict[str, int]:
    """Count annotations per category."""
    summary = {category: 0 for category in CATEGORIES}
    for annotation in annotations:
        summary[annotation.category] = summary.get(annotation.category, 0) + 1
    summary['total_changes'] = len(annotations)
    return summary


def annotations_to_dicts(annotations: List[Annotation]) -> List[Dict[str, Any]]:
    """Serialize annotations for a JSON response."""
    return [annotation.to_dict() for annotation in annotations]
