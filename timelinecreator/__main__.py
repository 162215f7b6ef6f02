"""Entry point for Timeline Creator - handles CLI arg parsing."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from timelinecreator import __version__


def _add_layout_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--name", "-n",
        type=str,
        default=None,
        help="Timeline name (default: from preset/settings, 'New Timeline')",
    )
    parser.add_argument(
        "--video", "-v",
        type=int,
        default=None,
        help="Number of video tracks, 1-20",
    )
    parser.add_argument(
        "--audio", "-a",
        type=int,
        default=None,
        help="Number of audio tracks, 1-20",
    )
    parser.add_argument(
        "--video-names",
        nargs="+",
        default=None,
        metavar="NAME",
        help="Video track names in order (blank entries become 'Video N')",
    )
    parser.add_argument(
        "--audio-names",
        nargs="+",
        default=None,
        metavar="NAME",
        help="Audio track names in order (blank entries become 'Audio N')",
    )
    parser.add_argument(
        "--start-tc", "-t",
        type=str,
        default=None,
        help="Start timecode HH:MM:SS:FF (default: 00:00:00:00)",
    )
    parser.add_argument(
        "--preset", "-p",
        type=str,
        default=None,
        help="Start from a saved preset",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to a YAML timeline layout file",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="timelinecreator",
        description="Create DaVinci Resolve timelines with custom video/audio tracks",
    )
    parser.add_argument(
        "--presets-file",
        type=str,
        default=None,
        help="Presets file (default: per-user location)",
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Settings JSON file (default: ~/.timelinecreator/settings.json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a timeline in the open project")
    _add_layout_arguments(create)
    create.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved layout without touching Resolve",
    )

    presets = commands.add_parser("presets", help="Manage saved presets")
    actions = presets.add_subparsers(dest="action", required=True)
    actions.add_parser("list", help="List preset names")
    show = actions.add_parser("show", help="Show a preset")
    show.add_argument("preset_name")
    save = actions.add_parser("save", help="Save a layout as a preset")
    save.add_argument("preset_name")
    save.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite an existing preset",
    )
    _add_layout_arguments(save)
    delete = actions.add_parser("delete", help="Delete a preset")
    delete.add_argument("preset_name")

    return parser.parse_args(argv)


def _resolve_layout(args, settings, store):
    """Return (config, timecode_valid), or None after reporting an error."""
    from timelinecreator.app import default_configuration, resolve_configuration

    layout = None
    if args.config:
        from timelinecreator.yaml_config import load_layout_config

        try:
            layout = load_layout_config(args.config)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return None

    # Precedence: CLI --preset > YAML preset > settings defaults
    preset_name = args.preset or (layout.preset if layout else None)
    if preset_name:
        base = store.get(store.load(), preset_name)
        if base is None:
            print(f"Error: preset '{preset_name}' not found", file=sys.stderr)
            return None
    else:
        base = default_configuration(settings)

    return resolve_configuration(
        base,
        layout,
        timeline_name=args.name,
        video_tracks=args.video,
        audio_tracks=args.audio,
        video_names=args.video_names,
        audio_names=args.audio_names,
        start_timecode=args.start_tc,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    from timelinecreator import app
    from timelinecreator.config import Settings
    from timelinecreator.presets import PresetStore

    settings = Settings.load(Path(args.settings) if args.settings else None)
    app.setup_logging(settings.log_level, verbose=args.verbose)

    # Precedence: CLI --presets-file > settings presets_path > per-user default
    presets_path = Path(args.presets_file) if args.presets_file else settings.resolved_presets_path
    store = PresetStore(presets_path)

    if args.command == "presets" and args.action == "list":
        return app.run_presets_list(store)
    if args.command == "presets" and args.action == "show":
        return app.run_presets_show(store, args.preset_name)
    if args.command == "presets" and args.action == "delete":
        return app.run_presets_delete(store, args.preset_name)

    resolved = _resolve_layout(args, settings, store)
    if resolved is None:
        return 1
    config, timecode_valid = resolved

    if args.command == "presets":
        if not timecode_valid:
            print(
                f"Warning: invalid start timecode format. Using {config.start_timecode}",
                file=sys.stderr,
            )
        return app.run_presets_save(store, args.preset_name, config, force=args.force)

    return app.run_create(config, timecode_valid, dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
