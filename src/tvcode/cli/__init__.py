"""CLI module for tvcode."""

import logging
import platform
from pathlib import Path

import click

from tvcode.cli.exit_codes import ExitCode
from tvcode.cli.output import EchoCallback, error_exit, format_summary
from tvcode.cli.prompts import prompt_subtitle_track
from tvcode.config import ConfigError, get_config
from tvcode.domain import HostPlatform
from tvcode.executor.transcode import TranscodeExecutor
from tvcode.introspector import FFprobeIntrospector
from tvcode.logging import configure_logging
from tvcode.policy import ProfileValidationError, load_profile
from tvcode.scanner import find_video_files
from tvcode.tools import build_availability_table, check_tool_availability
from tvcode.workflow import ProcessingContext, process_batch

logger = logging.getLogger(__name__)


def _detect_host() -> HostPlatform:
    """Return the host platform (extracted for mocking in tests)."""
    return HostPlatform.from_system(platform.system())


@click.command("tvcode")
@click.version_option(package_name="tvcode")
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--subtitles",
    "-s",
    is_flag=True,
    help="Offer to burn a subtitle track into each file that has one.",
)
@click.option(
    "--recursive",
    "-R",
    is_flag=True,
    help="Scan subdirectories as well.",
)
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Print the ffmpeg command for each file without encoding.",
)
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Delivery profile YAML (default: built-in Apple TV profile).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error status if any file fails.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
def main(
    directory: Path,
    subtitles: bool,
    recursive: bool,
    dry_run: bool,
    profile_path: Path | None,
    strict: bool,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Convert videos in DIRECTORY to an Apple TV compatible H.264/AAC MP4.

    Files that already comply are skipped. Hardware encoders are used when
    the host offers one, except when burning subtitles.
    """
    try:
        config = get_config(
            log_level=log_level,
            log_file=log_file,
            log_format="json" if log_json else None,
            profile_path=profile_path,
        )
    except ConfigError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)

    try:
        profile = load_profile(config.profile_path)
    except ProfileValidationError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)

    tools = check_tool_availability(config.tools.as_mapping())
    missing = [name for name, path in tools.items() if path is None]
    if missing:
        error_exit(
            f"{', '.join(missing)} not found. Please install ffmpeg first.",
            ExitCode.TOOL_NOT_AVAILABLE,
        )
    ffmpeg_path = tools["ffmpeg"]
    ffprobe_path = tools["ffprobe"]

    if not directory.is_dir():
        error_exit(f"Directory not found: {directory}", ExitCode.TARGET_NOT_FOUND)
    directory = directory.resolve()

    host = _detect_host()
    logger.info(
        "tvcode starting: host=%s, profile=%s, log_level=%s, dry_run=%s",
        host.value,
        profile.name,
        config.logging.level,
        dry_run,
    )
    availability = build_availability_table(ffmpeg_path, host, profile)

    files = find_video_files(directory, recursive=recursive)
    click.echo(f"Scanning directory: {directory}")
    if not files:
        click.echo("No video files found.")
        return
    click.echo(f"Found {len(files)} video file(s)")
    if subtitles:
        click.echo("Subtitle burning enabled (will prompt for each file)")
    if dry_run:
        click.echo("Dry run: no files will be written")

    context = ProcessingContext(
        introspector=FFprobeIntrospector(
            ffprobe_path,
            analyze_duration=profile.probe_analyze_duration,
            probe_size=profile.probe_size,
        ),
        executor=TranscodeExecutor(ffmpeg_path),
        host=host,
        availability=availability,
        profile=profile,
        burn_subtitles=subtitles,
        dry_run=dry_run,
        choose_track=prompt_subtitle_track,
        callback=EchoCallback(dry_run=dry_run),
    )

    try:
        summary = process_batch(files, context)
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        raise SystemExit(ExitCode.INTERRUPTED) from None

    click.echo("")
    click.echo(format_summary(summary))

    if strict and summary.has_failures:
        raise SystemExit(ExitCode.OPERATION_FAILED)
