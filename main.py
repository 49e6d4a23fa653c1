"""
Main entry point for the application

Reads feedback (one item per line, or a JSON list of strings), runs the
analysis pipeline and prints the report as JSON:
1. Score each item's sentiment and assign a topic
2. Group items into themes and keep the top 5
3. Derive a few insight statements from the statistics

Usage:
    python main.py feedback.txt
    cat feedback.txt | python main.py
    python main.py feedback.json --json-input --output report.json
"""
import argparse
import json
import sys
from typing import List, Optional

from pipeline.run_analysis import analyze_feedback, split_feedback_lines
from utils.logger import get_logger

logger = get_logger(__name__)


def read_feedback(source: str, json_input: bool = False) -> List[str]:
    """
    Read feedback texts from a file path, or stdin when source is "-"

    Args:
        source: File path or "-"
        json_input: Parse the content as a JSON list of strings

    Returns:
        Non-blank feedback texts

    Raises:
        ValueError: If JSON input is not a list of strings
    """
    if source == "-":
        content = sys.stdin.read()
    else:
        with open(source, 'r', encoding='utf-8') as f:
            content = f.read()

    if not json_input:
        return split_feedback_lines(content)

    payload = json.loads(content)
    if not isinstance(payload, list) or not all(isinstance(item, str) for item in payload):
        raise ValueError("Feedback JSON must be a list of strings")
    return [text for text in payload if text.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analyze feedback sentiment, themes and insights.")
    parser.add_argument("source", nargs="?", default="-",
                        help="Feedback file, one item per line (default: stdin)")
    parser.add_argument("--json-input", action="store_true",
                        help="Source is a JSON list of strings")
    parser.add_argument("--workers", type=int, default=None,
                        help="Threads used to classify items")
    parser.add_argument("--output", default=None,
                        help="Write the report to this file instead of stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - reads feedback, analyzes it and writes the report

    Returns:
        0 on success, 1 on error
    """
    args = build_parser().parse_args(argv)

    try:
        texts = read_feedback(args.source, json_input=args.json_input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Could not read feedback from {args.source}: {e}")
        return 1

    try:
        logger.info("=" * 60)
        logger.info(f"Feedback Insights Analyser - {len(texts)} items")
        logger.info("=" * 60)

        result = analyze_feedback(texts, max_workers=args.workers)
        report = result.to_json()

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(report)
            logger.info(f"✅ Report written to {args.output}")
        else:
            print(report)

        for insight in result.actionable_insights:
            logger.info(insight)

        return 0

    except Exception as e:
        logger.error(f"Error in analysis: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
