"""
command-copy: pick a command snippet from a Markdown file and copy it.

Every quote block directly followed by a code block is a snippet; the quote
text is its label:

    > List pods in a namespace

    ```sh
    kubectl get pods -n $namespace
    ```

Lowercase placeholders ($name, ${name}) are prompted for. The result goes to
the clipboard and to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import DEFAULT_SELECTOR, CommandCopyConfig, load_config_file
from .errors import CancellationError, CommandCopyError
from .observability import LoggingMetricsHook, NoOpMetricsHook
from .pipeline import CommandCopy

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="command-copy",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"command-copy {__version__}"
    )
    parser.add_argument(
        "path",
        nargs="?",
        metavar="FILE",
        help="Markdown file with snippets.",
    )
    parser.add_argument(
        "--file", "-f",
        dest="file",
        metavar="FILE",
        help="Markdown file with snippets (same as the positional FILE).",
    )
    parser.add_argument(
        "--strategy", "-s",
        metavar="STRATEGY",
        help=(
            "How to fill placeholders: 'substitution' replaces them in place, "
            "'assignment' prepends shell assignments. Unknown values mean "
            "substitution (default: substitution)."
        ),
    )
    parser.add_argument(
        "--selector",
        metavar="PROG",
        help=(
            f"Selector program (default: {DEFAULT_SELECTOR}). "
            "'rofi' also prompts for values with rofi."
        ),
    )
    parser.add_argument(
        "--selector-args",
        metavar="ARGS",
        help="Extra arguments for the selector, as one shell-quoted string.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Give up on the selector after this many seconds.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML file with defaults (default: $XDG_CONFIG_HOME/command-copy/config.yaml).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    return parser


def build_config(args: argparse.Namespace) -> CommandCopyConfig:
    """Merge CLI flags over config-file values over built-in defaults."""
    path = args.file or args.path
    defaults = CommandCopyConfig(path=path)
    file_values = load_config_file(args.config)

    def pick(flag, from_file, default):
        if flag is not None:
            return flag
        if from_file is not None:
            return from_file
        return default

    return CommandCopyConfig(
        path=path,
        strategy=pick(args.strategy, file_values.strategy, defaults.strategy),
        selector=pick(args.selector, file_values.selector, defaults.selector),
        selector_args=pick(
            args.selector_args, file_values.selector_args, defaults.selector_args
        ),
        timeout=pick(args.timeout, file_values.timeout, defaults.timeout),
        verbose=args.verbose,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.file and args.path:
        parser.error("give FILE either as an argument or with -f, not both")
    if not (args.file or args.path):
        parser.error("a FILE is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(args)
        logger.debug("Config: %s", config)
        metrics_hook = LoggingMetricsHook() if config.verbose else NoOpMetricsHook()
        CommandCopy(config, metrics_hook=metrics_hook).run()
    except CancellationError as e:
        print(f"cancelled: {e}", file=sys.stderr)
        return 130
    except KeyboardInterrupt:
        print("cancelled: interrupted", file=sys.stderr)
        return 130
    except CommandCopyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
