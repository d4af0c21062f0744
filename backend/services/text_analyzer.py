"""Text statistics and word frequency analysis."""
import re
from typing import Dict, Iterable, Optional

from config import STOP_WORDS, TOP_N_WORDS
from models.analysis import AnalysisResult, TextStats, WordFrequency


class TextAnalyzer:
    """Computes text statistics and ranked word frequencies."""

    WHITESPACE_PATTERN = re.compile(r"\s")
    SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
    WORD_PATTERN = re.compile(r"\w+")

    def __init__(self, stop_words: Iterable[str] = STOP_WORDS, top_n: int = TOP_N_WORDS):
        """
        Initialize TextAnalyzer.

        Args:
            stop_words: Words excluded from the frequency ranking
            top_n: Maximum number of entries in the frequency list
        """
        self.stop_words = frozenset(word.lower() for word in stop_words)
        self.top_n = top_n

    def analyze(self, text: str) -> AnalysisResult:
        """Compute both statistics and word frequencies for text."""
        return AnalysisResult(
            stats=self.analyze_stats(text),
            word_frequency=self.analyze_frequency(text)
        )

    def analyze_stats(self, text: str) -> TextStats:
        """
        Calculate word, character and sentence statistics.

        Words here are whitespace-separated chunks, so "fox." counts as one
        word of length 4. This differs from the tokenization used by
        analyze_frequency.

        Args:
            text: Extracted document text

        Returns:
            TextStats, all zero for empty text
        """
        words = text.split()
        sentences = [s for s in self.SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]
        word_count = len(words)

        avg_word_length = 0.0
        if word_count:
            avg_word_length = sum(len(word) for word in words) / word_count

        return TextStats(
            word_count=word_count,
            char_count=len(text),
            char_count_without_spaces=len(self.WHITESPACE_PATTERN.sub("", text)),
            sentence_count=len(sentences),
            avg_word_length=avg_word_length
        )

    def analyze_frequency(self, text: str, stop_words: Optional[Iterable[str]] = None) -> WordFrequency:
        """
        Rank the most frequent non-stop words.

        Args:
            text: Extracted document text
            stop_words: Overrides the configured stop words for this call

        Returns:
            Up to top_n (word, count) pairs sorted by count descending; words
            with equal counts keep the order in which they first appeared
        """
        excluded = self.stop_words if stop_words is None else frozenset(w.lower() for w in stop_words)

        frequency: Dict[str, int] = {}
        for word in self.WORD_PATTERN.findall(text.lower()):
            if word not in excluded:
                frequency[word] = frequency.get(word, 0) + 1

        # sorted() is stable, so ties stay in first-seen (insertion) order
        ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
        return ranked[:self.top_n]
