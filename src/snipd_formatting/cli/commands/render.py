"""
Snipd formatting render command.

SUMMARY: Render an episode export into a Markdown note

Reads an episode (with its snips) from a YAML or JSON file, renders it with
the user's formatting settings and writes ``<file name>.md`` to the output
directory. ``--stdout`` prints the note instead of writing it.
"""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

import yaml

from snipd_formatting.cli import (
    OutputFormatter,
    add_standard_flags,
    get_formatting_config,
    get_settings_store,
)
from snipd_formatting.core.exceptions import SnipdFormattingError
from snipd_formatting.core.models import Episode
from snipd_formatting.core.templating import TemplateEngine, write_episode_note
from snipd_formatting.core.utils.io import read_yaml

SUMMARY = "Render an episode export into a Markdown note"


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}") from exc


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "episode",
        help="Episode export file (YAML or JSON)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        default=".",
        help="Directory to write the note into (default: current directory)",
    )
    parser.add_argument(
        "--export-date",
        type=_iso_date,
        help="Date used for {{episode_export_date}} (default: today)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the note instead of writing it",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Render one episode note."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        data = read_yaml(Path(args.episode), raise_on_error=True)
        if data is None:
            formatter.error(f"Episode file is empty: {args.episode}", error_code="episode_error")
            return 1
        episode = Episode.from_mapping(data)

        engine = TemplateEngine(get_formatting_config(args))
        settings = get_settings_store(args).load()
        rendered = engine.render_episode(episode, settings, export_date=args.export_date)

        if args.stdout:
            if formatter.json_mode:
                formatter.json_output(
                    {
                        "file_name": rendered.file_name,
                        "frontmatter": rendered.frontmatter,
                        "body": rendered.body,
                    }
                )
            else:
                print(rendered.to_markdown(), end="")
            return 0

        path = write_episode_note(rendered, Path(args.output_dir))
        formatter.success(
            {"path": str(path), "file_name": rendered.file_name, "snips": len(rendered.snip_bodies)},
            f"Wrote {path}",
        )
        return 0

    except yaml.YAMLError as e:
        formatter.error(e, f"Invalid episode file {args.episode}: {e}", error_code="episode_error")
        return 1
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except OSError as e:
        formatter.error(e, error_code="io_error")
        return 1
