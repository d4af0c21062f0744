"""Analysis result data models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# (word, count) pairs, highest count first
WordFrequency = List[Tuple[str, int]]


@dataclass(frozen=True)
class TextStats:
    """Fixed-shape summary of text-level metrics for one document."""
    word_count: int = 0
    char_count: int = 0
    char_count_without_spaces: int = 0
    sentence_count: int = 0
    avg_word_length: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Render with the camelCase keys used on the wire."""
        return {
            "wordCount": self.word_count,
            "charCount": self.char_count,
            "charCountWithoutSpaces": self.char_count_without_spaces,
            "sentenceCount": self.sentence_count,
            "avgWordLength": self.avg_word_length,
        }


@dataclass
class AnalysisResult:
    """Statistics and ranked word frequencies for one analyzed document."""
    stats: TextStats
    word_frequency: WordFrequency = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "wordFrequency": [[word, count] for word, count in self.word_frequency],
        }
