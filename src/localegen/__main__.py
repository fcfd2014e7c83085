"""Command-line entry point.

Loads a directory of ARB bundles, validates them, builds the hierarchy
and prints the supported-language summary. Optional --locale arguments
are resolved against the built dispatcher.

Exit Codes:
    0: Hierarchy built
    1: Validation failed or the build raised an error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from localegen.constants import DEFAULT_BASELINE_LOCALE, DEFAULT_BUNDLE_PREFIX
from localegen.diagnostics import DiagnosticFormatter, LocaleGenError
from localegen.hierarchy import build_hierarchy
from localegen.loading import ArbDirectoryLoader
from localegen.summary import describe_supported_languages
from localegen.validation import validate_bundles


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="localegen",
        description="Build the locale fallback hierarchy of a directory of ARB bundles.",
    )
    parser.add_argument("directory", help="Directory holding <prefix>_<locale>.arb files.")
    parser.add_argument(
        "--prefix",
        default=DEFAULT_BUNDLE_PREFIX,
        help=f"Bundle filename prefix (default: {DEFAULT_BUNDLE_PREFIX}).",
    )
    parser.add_argument(
        "--baseline",
        default=DEFAULT_BASELINE_LOCALE,
        help=f"Baseline locale with authoritative attributes (default: {DEFAULT_BASELINE_LOCALE}).",
    )
    parser.add_argument(
        "--locale",
        action="append",
        default=[],
        metavar="ID",
        help="Locale to resolve, e.g. zh_Hant_TW or en-AU. Repeatable.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every stage decision.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return the exit code."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = DiagnosticFormatter()

    try:
        context = ArbDirectoryLoader(
            args.directory, prefix=args.prefix, baseline_locale=args.baseline
        ).load()

        result = validate_bundles(context)
        if not result.is_valid:
            print(formatter.format_validation_result(result), file=sys.stderr)
            return 1

        forest = build_hierarchy(context)
        dispatcher = forest.dispatcher
        resolutions = [(code, dispatcher.resolve_identifier(code)) for code in args.locale]
    except LocaleGenError as e:
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    for line in describe_supported_languages(forest):
        print(line)
    for code, resolution in resolutions:
        target = resolution.locale.raw if resolution.locale is not None else "-"
        print(f"{code} -> {target} ({resolution.state})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
