from __future__ import annotations

import json

import pytest

from polarity_correction import cli
from polarity_correction.correction import pipeline as PL
from polarity_correction.correction import segmentation as SEG
from polarity_correction.correction.adapter import ClassificationError

"""
Tests: segmentation, PolarityCorrection facade, correct_document, CLI
- Classifiers are keyword fakes; no NLTK data, no HF models
"""


class KeywordClassifier:
    """'+' anywhere in the sentence → positive, else negative."""

    def classify(self, sentence: str) -> str:
        return "positive" if "+" in sentence else "negative"


class FailingClassifier:
    def classify(self, sentence: str) -> str:
        raise ConnectionError("classifier service down")


REVIEW = "great screen +\nfast shipping +\nbattery died\nsolid build +\nwould buy again +\n"


# ──────────────────────────────────────────────────────────────────────────────
# Segmentation
# ──────────────────────────────────────────────────────────────────────────────

def test_split_document_line_semantics():
    assert SEG.split_document("a\nb\nc") == ["a", "b", "c"]
    assert SEG.split_document("a\nb\n\n") == ["a", "b"]
    assert SEG.split_document("a\n\nb") == ["a", "", "b"]
    assert SEG.split_document("") == []
    assert SEG.split_document("a. b.", separator=". ") == ["a", "b."]


def test_split_sentences_uses_sentencizer():
    out = SEG.split_sentences("I love it. The strap broke! Would buy again?")
    assert out == ["I love it.", "The strap broke!", "Would buy again?"]
    assert SEG.split_sentences("   ") == []


# ──────────────────────────────────────────────────────────────────────────────
# Facade
# ──────────────────────────────────────────────────────────────────────────────

def test_polarity_correction_drops_isolated_flip():
    pc = PL.PolarityCorrection(REVIEW, KeywordClassifier())
    assert pc.sentences == (
        "great screen +",
        "fast shipping +",
        "battery died",
        "solid build +",
        "would buy again +",
    )
    assert pc.consistent_sentences() == [
        "great screen +",
        "fast shipping +",
        "solid build +",
        "would buy again +",
    ]
    assert pc.removed_sentences() == ["battery died"]
    assert pc.to_text() == "great screen +\nfast shipping +\nsolid build +\nwould buy again +\n"


def test_consistent_sentences_returns_a_copy():
    pc = PL.PolarityCorrection(REVIEW, KeywordClassifier())
    pc.consistent_sentences().clear()
    assert len(pc.consistent_sentences()) == 4


def test_to_text_accepts_explicit_sentences():
    pc = PL.PolarityCorrection("x +", KeywordClassifier())
    assert pc.to_text(["a", "b"]) == "a\nb\n"


def test_empty_document():
    pc = PL.PolarityCorrection("", KeywordClassifier())
    assert pc.consistent_sentences() == []
    assert pc.removed_sentences() == []
    assert pc.to_text() == ""


def test_two_sentence_asymmetry():
    pc = PL.PolarityCorrection("loved it +\nreturned it", KeywordClassifier())
    assert pc.consistent_sentences() == ["loved it +"]
    assert pc.removed_sentences() == ["returned it"]


def test_classification_failure_aborts_whole_document():
    with pytest.raises(ClassificationError) as ei:
        PL.PolarityCorrection(REVIEW, FailingClassifier())
    assert ei.value.index == 0
    assert isinstance(ei.value.__cause__, ConnectionError)


def test_custom_segmenter_and_callable_classifier():
    pc = PL.PolarityCorrection(
        "good +|bad|good +|good again +",
        lambda s: "positive" if "+" in s else "negative",
        segmenter=lambda t: t.split("|"),
    )
    assert pc.consistent_sentences() == ["good +", "good +", "good again +"]


def test_correct_document_one_shot():
    assert PL.correct_document(REVIEW, KeywordClassifier()) == (
        "great screen +\nfast shipping +\nsolid build +\nwould buy again +\n"
    )


# ──────────────────────────────────────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def keyword_cli(monkeypatch):
    import polarity_correction.classifiers as CL

    monkeypatch.setattr(CL, "get_classifier", lambda name: KeywordClassifier(), raising=True)
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **k: False, raising=True)


def test_cli_prints_corrected_text(keyword_cli, capsys):
    rc = cli.main(["nice +", "meh", "nice again +", "still nice +"])
    assert rc == 0
    assert capsys.readouterr().out == "nice +\nnice again +\nstill nice +\n"


def test_cli_json_from_file(keyword_cli, tmp_path, capsys):
    doc = tmp_path / "review.txt"
    doc.write_text(REVIEW, encoding="utf-8")
    rc = cli.main(["--file", str(doc), "--json"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["removed"] == ["battery died"]
    assert payload["consistent"][-1] == "would buy again +"
    assert payload["sentences"][2] == {"sentence": "battery died", "polarity": "negative"}


def test_cli_reports_classification_failure(monkeypatch, capsys):
    import polarity_correction.classifiers as CL

    monkeypatch.setattr(CL, "get_classifier", lambda name: FailingClassifier(), raising=True)
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **k: False, raising=True)
    rc = cli.main(["anything"])
    assert rc == 1
    assert "classifier service down" in capsys.readouterr().err


def test_cli_reports_malformed_config(monkeypatch, tmp_path, capsys):
    (tmp_path / "classifiers.json").write_text("[1, 2]", encoding="utf-8")
    monkeypatch.setenv("POLARITY_DATA_DIR", str(tmp_path))
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **k: False, raising=True)
    rc = cli.main(["--classifier", "vader", "fine +"])
    assert rc == 1
    assert "expected dict" in capsys.readouterr().err
