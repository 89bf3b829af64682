#!/usr/bin/env python3
"""
PolishPal command-line proofreader.

Proofreads text locally through a correction provider, or sends it to a
running PolishPal server with --url.

Usage:
    polishpal "i wold no make same again mistak ." --provider mock
    echo "some text" | polishpal --json
    polishpal "some text" --url http://localhost:8787
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from polishpal.core import ALIGNMENT_MODES, POSITIONAL
from polishpal.providers import PROVIDERS
from polishpal.python_api import PythonAPI

logger = logging.getLogger(__name__)


def proofread_remote(url: str, text: str, timeout: float = 60) -> Dict[str, Any]:
    """POST text to a PolishPal server and return its JSON result."""
    endpoint = f"{url.rstrip('/')}/api/proofread"
    response = requests.post(endpoint, json={'text': text}, timeout=timeout)

    try:
        payload = response.json()
    except ValueError:
        payload = {}

    if response.status_code != 200:
        message = payload.get('error') or response.text
        raise RuntimeError(f"Server returned {response.status_code}: {message}")
    return payload


def format_analysis(analysis: List[Dict[str, Any]]) -> str:
    """Render annotations as an aligned plain-text table."""
    if not analysis:
        return "No changes detected."

    lines = [f"{'POS':>4}  {'TYPE':<15} SUGGESTION"]
    for item in analysis:
        lines.append(f"{item['position']:>4}  {item['type']:<15} {item['suggestion']}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Proofread text and show word-level changes')
    parser.add_argument('text', nargs='?', help='Text to proofread (read from stdin if omitted)')
    parser.add_argument('--provider', choices=PROVIDERS,
                        help='Correction provider (default: openai)')
    parser.add_argument('--model', help='Model override for the provider')
    parser.add_argument('--alignment', choices=ALIGNMENT_MODES,
                        help='Word alignment mode (default: positional)')
    parser.add_argument('--fallback', action='store_true',
                        help='Use mock corrections if the provider fails')
    parser.add_argument('--url', help='Send the text to a running PolishPal server instead; '
                                      'the server\'s own provider and alignment settings apply')
    parser.add_argument('--json', action='store_true', help='Print the raw JSON result')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


LOCAL_ONLY_OPTIONS = ('provider', 'model', 'alignment', 'fallback')


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.url:
        given = [f"--{name}" for name in LOCAL_ONLY_OPTIONS if getattr(args, name)]
        if given:
            parser.error(f"{', '.join(given)} cannot be combined with --url")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.text if args.text is not None else sys.stdin.read()
    if not text.strip():
        print("Error: no text given", file=sys.stderr)
        return 2

    if args.url:
        try:
            result = proofread_remote(args.url, text)
        except (requests.RequestException, RuntimeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        api = PythonAPI(provider=args.provider or 'openai', model=args.model,
                        alignment=args.alignment or POSITIONAL, fallback_to_mock=args.fallback)
        result = api.proofread(text)
        if result['status'] == 'error':
            print(f"Error: {result['message']}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(result['corrected'])
        print()
        print(format_analysis(result['analysis']))

    return 0


if __name__ == '__main__':
    sys.exit(main())
