import argparse
import logging
import sys

import config
from detector import compare
from errors import InputTooLargeError
from preprocessor import read_source_file
from reporter import format_json_report, format_text_report, generate_html_report

EXIT_OK = 0
EXIT_UNREADABLE = 1
EXIT_TOO_LARGE = 2

BANNER = """
  ============================================================
  ||     CODE PLAGIARISM DETECTOR                           ||
  ||     Multi-Algorithm Detection System                   ||
  ============================================================
"""


def build_parser():
    """
    Build the command line parser.

    Returns:
        argparse.ArgumentParser: Parser for the file paths and report options
    """
    parser = argparse.ArgumentParser(description="Compare two source files for likely plagiarism")
    parser.add_argument("file1", nargs="?", help="Path to the first code file")
    parser.add_argument("file2", nargs="?", help="Path to the second code file")
    parser.add_argument("--html", metavar="OUT", help="Also write an HTML report to OUT")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON instead of the text report")
    parser.add_argument("--max-bytes", type=int, default=config.MAX_INPUT_BYTES,
                        help=f"Per-file size limit in bytes (default {config.MAX_INPUT_BYTES})")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Log detailed progress")
    return parser


def check_plagiarism(file1, file2, max_bytes=None, html_output=None, as_json=False, show_progress=True):
    """
    Main function to check plagiarism between two files.

    Args:
        file1, file2 (str): Paths to the source files
        max_bytes (int, optional): Per-file size limit
        html_output (str, optional): Path for an HTML report
        as_json (bool): Print JSON instead of the text report
        show_progress (bool): Show a progress bar while the metrics run

    Returns:
        ComparisonResult

    Raises:
        OSError: If a file cannot be read
        InputTooLargeError: If a file exceeds a size limit
    """
    if not as_json:
        print("  Analyzing files...")
    code1 = read_source_file(file1, max_bytes)
    code2 = read_source_file(file2, max_bytes)

    result = compare(code1, code2, max_bytes=max_bytes, show_progress=show_progress)

    if as_json:
        print(format_json_report(result, file1, file2))
    else:
        print(format_text_report(result))

    if html_output:
        path = generate_html_report(result, file1, file2, code1, code2, html_output)
        # stdout carries only the JSON document in JSON mode
        if not as_json:
            print(f"Report generated: {path}")

    return result


def main(argv=None):
    """
    Command line entry point.

    Args:
        argv (list, optional): Arguments without the program name, defaults to sys.argv[1:]

    Returns:
        int: EXIT_OK, EXIT_UNREADABLE or EXIT_TOO_LARGE
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    file1, file2 = args.file1, args.file2
    if not args.json:
        print(BANNER)
    # Prompt for whatever was not given on the command line
    try:
        if not file1:
            file1 = input("  Enter path to first code file:  ").strip()
        if not file2:
            file2 = input("  Enter path to second code file: ").strip()
    except EOFError:
        print("\nError: Could not read one or both files.", file=sys.stderr)
        return EXIT_UNREADABLE

    try:
        check_plagiarism(
            file1,
            file2,
            max_bytes=args.max_bytes,
            html_output=args.html,
            as_json=args.json,
            show_progress=not (args.no_progress or args.json),
        )
    except InputTooLargeError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return EXIT_TOO_LARGE
    except OSError as e:
        print(f"\nError: Could not read one or both files: {e}", file=sys.stderr)
        return EXIT_UNREADABLE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
