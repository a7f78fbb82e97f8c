# SPDX-FileCopyrightText: 2025-present linuxdaemon <linuxdaemon.irc@gmail.com>
#
# SPDX-License-Identifier: MIT
import sys
from pathlib import Path

import click
from loguru import logger
from tqdm import tqdm

from video_compressor._version import __version__
from video_compressor.video_compressor import (
    compress_videos,
    delete_original_files,
    walk_files,
)

LOGGER_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(
        lambda msg: tqdm.write(msg, file=sys.stderr, end=""),
        level=level,
        format=LOGGER_FORMAT,
        colorize=sys.stderr.isatty(),
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Compresses video files in a directory using ffmpeg with hevc_nvenc.",
)
@click.version_option(version=__version__, prog_name="video-compressor")
@click.option(
    "-i",
    "--input",
    "input_directory",
    metavar="INPUT_DIRECTORY",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    required=True,
    help="Specifies the input directory containing video files",
)
@click.option(
    "-o",
    "--output",
    "output_directory",
    metavar="OUTPUT_DIRECTORY",
    type=click.Path(dir_okay=True, file_okay=False, path_type=Path),
    required=True,
    help="Specifies the output directory for the compressed videos",
)
def video_compressor(input_directory: Path, output_directory: Path) -> None:
    configure_logging()

    try:
        compress_videos(input_directory, output_directory)
        # Re-walk so files added or removed during the batch are picked up
        delete_original_files(walk_files(input_directory))
    except OSError as e:
        raise click.ClickException(str(e)) from e
