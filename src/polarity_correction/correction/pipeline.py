# src/polarity_correction/correction/pipeline.py
from __future__ import annotations

"""
pipeline.py
===========

Does: Document-level polarity correction. Segments the text, classifies every
      sentence, and keeps the locally consistent subsequence.
Returns:
  - PolarityCorrection(text, classifier).consistent_sentences() -> list[str]
  - PolarityCorrection(...).to_text() -> str (newline after every sentence)
  - correct_document(text, classifier) -> str
Used by: the CLI and callers that only need corrected text.
"""

import logging
from collections.abc import Callable, Sequence

from polarity_correction.correction.adapter import ClassifierLike, classify_sentences
from polarity_correction.correction.consistency import (
    filter_consistent,
    outlier_indices,
    sentences_to_text,
)
from polarity_correction.correction.segmentation import split_document
from polarity_correction.correction.types import ClassifiedSentence

logger = logging.getLogger(__name__)

Segmenter = Callable[[str], list[str]]

__all__ = ["PolarityCorrection", "correct_document"]


class PolarityCorrection:
    """
    Corrects sentiment-polarity inconsistencies in one document.

    Work happens eagerly in the constructor; a ClassificationError raised by the
    classifier propagates from here and no partial result is kept.

    Args:
        text: the raw document.
        classifier: object with classify(sentence) -> label, or a plain callable.
        segmenter: text -> sentences. Defaults to one sentence per line.
        debug: trace every filter decision through the 'consistency' topic.
    """

    def __init__(
        self,
        text: str,
        classifier: ClassifierLike,
        *,
        segmenter: Segmenter = split_document,
        debug: bool = False,
    ) -> None:
        self.sentences: tuple[str, ...] = tuple(segmenter(text))
        self.classified: tuple[ClassifiedSentence, ...] = tuple(
            classify_sentences(self.sentences, classifier)
        )
        self._consistent: tuple[str, ...] = tuple(filter_consistent(self.classified, debug=debug))
        logger.info(
            "Polarity correction kept %d of %d sentences.",
            len(self._consistent),
            len(self.sentences),
        )

    def consistent_sentences(self) -> list[str]:
        return list(self._consistent)

    def removed_sentences(self) -> list[str]:
        """Sentences dropped as outliers, in document order. Empty when the fallback fired."""
        if len(self._consistent) == len(self.sentences):
            return []
        marked = outlier_indices([c.polarity for c in self.classified])
        return [self.sentences[i] for i in marked]

    def to_text(self, sentences: Sequence[str] | None = None) -> str:
        return sentences_to_text(self._consistent if sentences is None else sentences)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sentences={len(self.sentences)}, "
            f"consistent={len(self._consistent)})"
        )


def correct_document(
    text: str,
    classifier: ClassifierLike,
    *,
    segmenter: Segmenter = split_document,
    debug: bool = False,
) -> str:
    """One-shot helper: corrected text for `text`."""
    return PolarityCorrection(text, classifier, segmenter=segmenter, debug=debug).to_text()
