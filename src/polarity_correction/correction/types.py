# polarity_correction/correction/types.py
from __future__ import annotations

from typing import Literal, NamedTuple, Protocol, runtime_checkable

"""
types.py.

Does: Define the polarity label, the classified-sentence pair, and the
structural contract any sentence classifier must satisfy.
"""

Polarity = Literal["positive", "negative"]

POSITIVE: Polarity = "positive"
NEGATIVE: Polarity = "negative"


class ClassifiedSentence(NamedTuple):
    sentence: str
    polarity: Polarity


@runtime_checkable
class SentenceClassifier(Protocol):
    """
    Structural contract for a per-sentence sentiment classifier.

    - classify(sentence): return a label string. Only the exact label
      "positive" counts as positive; every other value is read as negative.
    """

    def classify(self, sentence: str) -> str: ...


__all__ = [
    "Polarity",
    "POSITIVE",
    "NEGATIVE",
    "ClassifiedSentence",
    "SentenceClassifier",
]
