# src/polarity_correction/cli.py
import argparse
import json
import logging
import sys

from dotenv import load_dotenv


def _read_text(args: argparse.Namespace) -> str:
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    if args.text:
        # each positional argument is one sentence
        return "\n".join(args.text)
    return sys.stdin.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polarity-correct",
        description="Remove isolated sentiment-polarity outliers from a document.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Sentences to correct, one per argument (default: read --file or stdin)",
    )
    parser.add_argument("--file", "-f", help="Read the document from this file (one sentence per line)")
    parser.add_argument(
        "--classifier",
        default="vader",
        choices=["vader", "zero-shot"],
        help="Sentence classifier to use",
    )
    parser.add_argument(
        "--spacy",
        action="store_true",
        help="Segment with the spaCy sentencizer instead of one sentence per line",
    )
    parser.add_argument("--json", action="store_true", help="Emit kept/removed sentences as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None) -> int:
    """CLI: classify each sentence, drop isolated polarity flips, print the result."""
    from .classifiers import get_classifier
    from .correction import (
        ClassificationError,
        PolarityCorrection,
        split_document,
        split_sentences,
    )

    # .env only at runtime (no import side effects)
    load_dotenv()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        text = _read_text(args)
        classifier = get_classifier(args.classifier)
        segmenter = split_sentences if args.spacy else split_document
        pc = PolarityCorrection(text, classifier, segmenter=segmenter, debug=args.debug)
    except ClassificationError as e:
        cause = e.__cause__
        print(f"❌ Error: {e}" + (f" ({cause})" if cause else ""), file=sys.stderr)
        return 1
    except (OSError, RuntimeError, TypeError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {
            "sentences": [{"sentence": c.sentence, "polarity": c.polarity} for c in pc.classified],
            "consistent": pc.consistent_sentences(),
            "removed": pc.removed_sentences(),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(pc.to_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
