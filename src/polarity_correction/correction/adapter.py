# src/polarity_correction/correction/adapter.py

"""
Classifier Adapter.
-------------------
Does:
- Call the injected classifier once per sentence, strictly in input order
- Map labels to polarity: exact "positive" → positive, anything else → negative
- Wrap classifier failures in ClassificationError (chained), never default them
Returns: list[ClassifiedSentence] in input order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Union

from polarity_correction.correction.types import (
    NEGATIVE,
    POSITIVE,
    ClassifiedSentence,
    Polarity,
    SentenceClassifier,
)

__all__ = [
    "ClassificationError",
    "ClassifierLike",
    "classify_sentences",
    "to_polarity",
]

logger = logging.getLogger(__name__)

ClassifierLike = Union[SentenceClassifier, Callable[[str], str]]


class ClassificationError(RuntimeError):
    """Raise when the classifier fails on a sentence; the original error is the __cause__."""

    def __init__(self, index: int, sentence: str):
        preview = sentence if len(sentence) <= 60 else sentence[:57] + "..."
        super().__init__(f"classifier failed on sentence #{index}: {preview!r}")
        self.index = index
        self.sentence = sentence


def to_polarity(label: object) -> Polarity:
    """Exact "positive" is positive. Case variants, "neutral", None, etc. are negative."""
    return POSITIVE if label == POSITIVE else NEGATIVE


def _resolve_classify(classifier: ClassifierLike) -> Callable[[str], str]:
    if isinstance(classifier, SentenceClassifier):
        return classifier.classify
    if callable(classifier):
        return classifier
    raise TypeError(
        f"classifier must provide classify(sentence) or be callable, got {type(classifier).__name__}"
    )


def classify_sentences(
    sentences: Iterable[str], classifier: ClassifierLike
) -> list[ClassifiedSentence]:
    """
    Classifies each sentence with `classifier` and pairs it with its polarity.

    No retries and no caching: duplicate sentences are classified again.
    The first failure aborts the whole document.
    """
    classify = _resolve_classify(classifier)
    out: list[ClassifiedSentence] = []
    for i, sentence in enumerate(sentences):
        try:
            label = classify(sentence)
        except Exception as err:
            logger.error("Classifier failed on sentence #%d: %r", i, sentence)
            raise ClassificationError(i, sentence) from err
        polarity = to_polarity(label)
        logger.debug("#%d label=%r → %s", i, label, polarity)
        out.append(ClassifiedSentence(sentence, polarity))
    return out
