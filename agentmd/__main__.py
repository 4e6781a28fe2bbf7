"""CLI entry point: python -m agentmd [INPUT] [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from agentmd import settings
from agentmd.errors import AgentMDError
from agentmd.items import Metadata
from agentmd.pipeline import convert_html, convert_markdown
from agentmd.profiles import load_profile
from agentmd.rag import to_jsonl
from agentmd.sources import infer_platform, infer_source_kind

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentmd",
        description=(
            "Turn extracted page content into clean, agent-optimized Markdown.\n"
            "Reads Markdown (or HTML with --html) from a file or stdin."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", default="-", metavar="INPUT",
                        help="Input file, or '-' for stdin (default: stdin)")
    parser.add_argument("--html", action="store_true", default=False,
                        help="Treat the input as HTML and convert it first")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Source URL recorded in the frontmatter")
    parser.add_argument("--title", default="", help="Document title")
    parser.add_argument("--description", default=None, help="Document description")
    parser.add_argument("--author", default=None, help="Author name")
    parser.add_argument("--published-at", default=None, metavar="DATE",
                        help="Publication date")
    parser.add_argument("--image", default=None, metavar="URL", help="Lead image URL")
    parser.add_argument("--canonical-url", default=None, metavar="URL",
                        help="Canonical URL (default: --url)")
    parser.add_argument("--language", default=None, metavar="CODE",
                        help="Content language code")
    parser.add_argument("--source", default=None,
                        choices=["document", "social", "auto"],
                        metavar="{document,social,auto}",
                        help=f"Frontmatter variant; 'auto' infers it from --url "
                             f"(default: {settings.DEFAULT_SOURCE})")
    parser.add_argument("--chunk-size", type=int, default=None, metavar="N",
                        help="Split the output into chunks of at most N characters")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the full result as JSON instead of Markdown")
    parser.add_argument("--chunks", action="store_true", default=False,
                        help="Print each chunk separated by a rule")
    parser.add_argument("--jsonl", default=None, metavar="PATH",
                        help="Write chunks as JSONL records to PATH")
    parser.add_argument("--profile", default=None, metavar="PATH",
                        help="YAML profile with default and per-domain options")
    parser.add_argument("--detect-language", action="store_true", default=None,
                        help="Detect the language when --language is not given")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _resolve_options(args: argparse.Namespace) -> dict[str, Any]:
    """Merge defaults < profile < CLI flags."""
    options: dict[str, Any] = {
        "source": settings.DEFAULT_SOURCE,
        "chunk_size": settings.DEFAULT_CHUNK_SIZE,
        "detect_language": settings.DETECT_LANGUAGE,
    }
    if args.profile:
        options.update(load_profile(args.profile, args.url))
    if args.source is not None:
        options["source"] = args.source
    if args.chunk_size is not None:
        options["chunk_size"] = args.chunk_size
    if args.detect_language is not None:
        options["detect_language"] = args.detect_language
    if options["source"] == "auto":
        options["source"] = infer_source_kind(args.url)
    return options


def _print_chunks(result: Any) -> None:
    from rich.console import Console
    from rich.rule import Rule

    console = Console()
    for chunk in result.chunks or []:
        console.print(Rule(f"chunk {chunk.index + 1}/{chunk.total} ({len(chunk.content)} chars)"))
        console.print(chunk.content, markup=False, highlight=False, soft_wrap=True)


def _print_export_summary(path: str, written: int) -> None:
    from rich.console import Console

    Console(stderr=True).print(
        f"[bold cyan]agentmd[/bold cyan]: wrote [green]{written}[/green] "
        f"chunk record(s) to [yellow]{path}[/yellow]",
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    try:
        options = _resolve_options(args)
        raw = _read_input(args.input)
    except (AgentMDError, OSError) as exc:
        print(f"agentmd: {exc}", file=sys.stderr)
        return 1

    metadata = Metadata(
        title=args.title,
        description=args.description,
        author=args.author,
        published_at=args.published_at,
        image=args.image,
        canonical_url=args.canonical_url,
        language=args.language,
        platform=infer_platform(args.url),
    )
    kwargs: dict[str, Any] = {
        "url": args.url,
        "metadata": metadata,
        "source": options["source"],
        "chunk_size": options["chunk_size"],
        "detect_lang": bool(options["detect_language"]),
    }

    try:
        if args.html:
            result = convert_html(raw, **kwargs)
        else:
            result = convert_markdown(raw, **kwargs)
    except AgentMDError as exc:
        print(f"agentmd: {exc}", file=sys.stderr)
        return 1

    if args.jsonl:
        try:
            written = to_jsonl([result], args.jsonl)
        except OSError as exc:
            print(f"agentmd: cannot write {args.jsonl}: {exc}", file=sys.stderr)
            return 1
        _print_export_summary(args.jsonl, written)

    if args.json:
        sys.stdout.write(result.model_dump_json(indent=2) + "\n")
    elif args.chunks and result.chunks:
        _print_chunks(result)
    else:
        sys.stdout.write(result.markdown)
        if not result.markdown.endswith("\n"):
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
