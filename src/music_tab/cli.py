"""
Music Tab CLI - preview the track filter and the sound mute policy.

Drives the overlay against an in-memory copy of the music list so filter
and mute settings can be checked outside the client.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from rich.console import Console
from rich.table import Table

from music_tab.core.config import Config, get_config_path, get_log_file_path, load_config
from music_tab.core.output import setup_loguru
from music_tab.domain.audio import AudioEventClassifier, Decision, SoundSource
from music_tab.domain.tracks import TrackStatus, VisibleLayout
from music_tab.overlay import InMemoryHost, MusicPlugin

STATUS_CHOICES = {
    "all": TrackStatus.ALL,
    "found": TrackStatus.FOUND,
    "not-found": TrackStatus.NOT_FOUND,
}

console = Console()


def load_tracks(path: Path) -> list[dict[str, Any]]:
    """Read a tracks JSON file: a list of ``{label, color, y, height}``.

    Numeric fields are converted to ints here so a bad value is reported
    against the file rather than failing later in the host.

    Raises:
        ValueError: If the file is not a list of track objects, or a
            numeric field is not an integer
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("tracks file must contain a JSON list")
    tracks = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not {"label", "y", "height"} <= item.keys():
            raise ValueError(f"track #{index} needs label, y and height")
        track = dict(item, label=str(item["label"]))
        for key in ("color", "y", "height"):
            if key not in item:
                continue
            try:
                track[key] = int(item[key])
            except (TypeError, ValueError):
                raise ValueError(
                    f"track #{index} {key} must be an integer, got {item[key]!r}"
                ) from None
        tracks.append(track)
    return tracks


def render_layout(layout: VisibleLayout) -> Table:
    table = Table(title="Visible tracks")
    table.add_column("Y", justify="right", style="cyan")
    table.add_column("Track")
    table.add_column("Color", justify="right", style="dim")
    for placement in layout.placements:
        entry = placement.entry
        table.add_row(str(placement.y_offset), entry.label, f"#{entry.status_color:06x}")
    return table


def run_filter(args: argparse.Namespace, config: Config) -> int:
    try:
        tracks = load_tracks(args.tracks)
    except (OSError, ValueError) as e:
        console.print(f"Cannot read tracks from {args.tracks}: {e}", style="bold red")
        return 1

    host = InMemoryHost.from_tracks(tracks)
    if args.scroll:
        host.scroll_y, host.scroll_height = args.scroll

    plugin = MusicPlugin(host, host.tasks, lambda: config.mute)
    plugin.start_up(host.dispatcher)
    plugin.state.filter = plugin.state.filter.with_status(STATUS_CHOICES[args.status])
    layout = plugin.update_filter(args.query)
    plugin.shut_down()

    if layout is None:
        console.print("Track list not loaded", style="yellow")
        return 1

    console.print(render_layout(layout))
    console.print(
        f"{len(layout.placements)}/{len(tracks)} visible | "
        f"content height {layout.total_content_height} | "
        f"scroll offset {layout.new_scroll_offset}"
    )
    return 0


def run_classify(args: argparse.Namespace, config: Config) -> int:
    classifier = AudioEventClassifier(lambda: config.mute)
    if args.kind == "area":
        decision = classifier.classify_area(SoundSource(args.source), args.sound_id)
    else:
        decision = classifier.classify_global(args.sound_id)

    style = "bold red" if decision is Decision.SUPPRESS else "green"
    console.print(f"{args.kind} sound {args.sound_id}: {decision.value.upper()}", style=style)
    return 0


def run_config(args: argparse.Namespace, config: Config) -> int:
    table = Table(title=str(args.config or get_config_path()))
    table.add_column("Setting")
    table.add_column("Value")
    for name, value in vars(config.mute).items():
        table.add_row(name, "on" if value else "off")
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.log_file", str(get_log_file_path(config)))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-tab",
        description="Preview the music list filter and sound mute policy",
    )
    parser.add_argument("--config", type=Path, help="Path to config.toml")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also log to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser("filter", help="Filter a track list")
    filter_parser.add_argument("tracks", type=Path, help="Tracks JSON file")
    filter_parser.add_argument("-q", "--query", default="", help="Search text")
    filter_parser.add_argument(
        "-s", "--status", choices=sorted(STATUS_CHOICES), default="all"
    )
    filter_parser.add_argument(
        "--scroll",
        nargs=2,
        type=int,
        metavar=("OFFSET", "HEIGHT"),
        help="Scroll position and scroll height before filtering",
    )
    filter_parser.set_defaults(func=run_filter)

    classify_parser = subparsers.add_parser("classify", help="Check a sound")
    kinds = classify_parser.add_subparsers(dest="kind", required=True)
    area_parser = kinds.add_parser("area", help="Positional sound")
    area_parser.add_argument(
        "--source", choices=[s.value for s in SoundSource], default="none"
    )
    area_parser.add_argument("sound_id", type=int)
    global_parser = kinds.add_parser("global", help="Non-positional sound")
    global_parser.add_argument("sound_id", type=int)
    classify_parser.set_defaults(func=run_classify)

    config_parser = subparsers.add_parser("config", help="Show effective settings")
    config_parser.set_defaults(func=run_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_loguru(
        get_log_file_path(config), level=config.logging.level, console=args.verbose
    )
    logger.debug(f"Running {args.command}")
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
