import argparse
import sys
from pathlib import Path

from .api import get_sanitizer, supported_profiles
from .config import load_config
from .detector import find_dangerous_signatures
from .legacy import nl2br, strip_html


def _read_input(source: str, max_bytes: int) -> str:
    """Read *source* (a file path or ``-`` for stdin), enforcing *max_bytes*."""
    if source == "-":
        data = sys.stdin.read()
        if len(data.encode("utf-8")) > max_bytes:
            raise ValueError(f"stdin input exceeds {max_bytes} bytes.")
        return data

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"'{path}' not found.")
    if path.stat().st_size > max_bytes:
        raise ValueError(f"'{path}' exceeds {max_bytes} bytes.")
    return path.read_text(encoding="utf-8")


def main() -> None:
    """CLI entry point: read untrusted HTML, sanitize it, and write the result."""
    profiles = supported_profiles()
    parser = argparse.ArgumentParser(
        prog="htmlguard",
        description="Sanitize untrusted HTML fragments for direct rendering",
    )
    parser.add_argument("input", type=str, help="Path to the HTML file, or '-' to read stdin")
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    parser.add_argument(
        "-p",
        "--profile",
        type=str,
        choices=profiles,
        default=None,
        help=f"Sanitizer profile (choices: {', '.join(profiles)}; default: from config, else strict)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--nl2br",
        action="store_true",
        help="Convert newlines to <br> before sanitizing",
    )
    parser.add_argument(
        "--strip",
        action="store_true",
        help="Write a plain-text preview with all tags removed",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report danger signatures found in the raw input (exit 1 if any)",
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        raw = _read_input(args.input, config.safety.max_input_bytes)
        sanitizer = get_sanitizer(args.profile or config.profile)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.check:
        matched = find_dangerous_signatures(raw)
        for label in matched:
            print(f"dangerous: {label}")
        if matched:
            sys.exit(1)
        print("clean")
        return

    flagged = find_dangerous_signatures(raw) if config.audit.enabled else []
    if flagged:
        print(
            f"Warning: input contains potentially dangerous HTML: {', '.join(flagged)}",
            file=sys.stderr,
        )

    result = sanitizer(nl2br(raw) if args.nl2br else raw)
    if args.strip:
        result = strip_html(result)

    if args.output is None:
        sys.stdout.write(result)
    else:
        args.output.write_text(result, encoding="utf-8")
        print(f"Written → {args.output}")

    if flagged and config.audit.fail_on_dangerous:
        sys.exit(1)


if __name__ == "__main__":
    main()
