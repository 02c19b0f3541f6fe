from __future__ import annotations

import pytest

from polarity_correction.correction import adapter as A
from polarity_correction.correction.types import (
    NEGATIVE,
    POSITIVE,
    ClassifiedSentence,
    SentenceClassifier,
)

"""
Tests: correction/adapter.py
- Exact "positive" match; everything else → negative
- One call per sentence, in order, duplicates included
- Classifier failures propagate as ClassificationError (chained), nothing defaulted
"""


class RecordingClassifier:
    """Returns scripted labels and records every call."""

    def __init__(self, labels):
        self._labels = list(labels)
        self.calls: list[str] = []

    def classify(self, sentence: str) -> str:
        self.calls.append(sentence)
        return self._labels[len(self.calls) - 1]


class ExplodingClassifier:
    def __init__(self, fail_on: str):
        self.fail_on = fail_on
        self.calls: list[str] = []

    def classify(self, sentence: str) -> str:
        self.calls.append(sentence)
        if sentence == self.fail_on:
            raise TimeoutError("model backend unavailable")
        return "positive"


@pytest.mark.parametrize(
    "label, expected",
    [
        ("positive", POSITIVE),
        ("negative", NEGATIVE),
        ("neutral", NEGATIVE),
        ("Positive", NEGATIVE),
        (" positive", NEGATIVE),
        ("", NEGATIVE),
        (None, NEGATIVE),
        (1, NEGATIVE),
    ],
)
def test_to_polarity_exact_match_only(label, expected):
    assert A.to_polarity(label) == expected


def test_classify_sentences_one_call_per_sentence_in_order():
    clf = RecordingClassifier(["positive", "mixed", "positive"])
    out = A.classify_sentences(["a", "b", "a"], clf)
    assert clf.calls == ["a", "b", "a"]  # no caching of duplicates
    assert out == [
        ClassifiedSentence("a", POSITIVE),
        ClassifiedSentence("b", NEGATIVE),
        ClassifiedSentence("a", POSITIVE),
    ]


def test_classify_sentences_accepts_plain_callable():
    out = A.classify_sentences(["good", "bad"], lambda s: "positive" if s == "good" else "negative")
    assert [c.polarity for c in out] == [POSITIVE, NEGATIVE]


def test_classify_sentences_empty_input():
    clf = RecordingClassifier([])
    assert A.classify_sentences([], clf) == []
    assert clf.calls == []


def test_classifier_failure_propagates_with_context():
    clf = ExplodingClassifier(fail_on="second")
    with pytest.raises(A.ClassificationError) as ei:
        A.classify_sentences(["first", "second", "third"], clf)
    err = ei.value
    assert err.index == 1
    assert err.sentence == "second"
    assert isinstance(err.__cause__, TimeoutError)
    assert clf.calls == ["first", "second"]  # aborted, no later calls, no retry


def test_classification_error_is_runtime_error():
    assert issubclass(A.ClassificationError, RuntimeError)


def test_rejects_non_classifier():
    with pytest.raises(TypeError):
        A.classify_sentences(["x"], object())


def test_protocol_is_structural():
    assert isinstance(RecordingClassifier([]), SentenceClassifier)
    assert not isinstance(lambda s: s, SentenceClassifier)
