"""
correction
==========

Package for sentence-level polarity correction.

Submodules:
- types        : Polarity label, ClassifiedSentence, SentenceClassifier protocol.
- adapter      : One classifier call per sentence; label → polarity mapping.
- consistency  : Isolated-outlier removal with empty-result fallback.
- segmentation : Line split and spaCy sentencizer.
- pipeline     : PolarityCorrection facade and correct_document().
"""

from .adapter import (
    ClassificationError,
    classify_sentences,
    to_polarity,
)
from .consistency import (
    filter_consistent,
    outlier_indices,
    sentences_to_text,
)
from .pipeline import PolarityCorrection, correct_document
from .segmentation import split_document, split_sentences
from .types import (
    NEGATIVE,
    POSITIVE,
    ClassifiedSentence,
    Polarity,
    SentenceClassifier,
)

__all__ = [
    "Polarity",
    "POSITIVE",
    "NEGATIVE",
    "ClassifiedSentence",
    "SentenceClassifier",
    "ClassificationError",
    "to_polarity",
    "classify_sentences",
    "filter_consistent",
    "outlier_indices",
    "sentences_to_text",
    "split_document",
    "split_sentences",
    "PolarityCorrection",
    "correct_document",
]

__docformat__ = "google"
