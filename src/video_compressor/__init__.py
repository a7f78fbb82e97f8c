# SPDX-FileCopyrightText: 2025-present linuxdaemon <linuxdaemon.irc@gmail.com>
#
# SPDX-License-Identifier: MIT
from video_compressor._version import __version__
from video_compressor.video_compressor import (
    DEFAULT_ENCODER_SETTINGS,
    BatchResult,
    EncoderSettings,
    JobDescriptor,
    build_command,
    build_job,
    compress_videos,
    delete_original_files,
    ensure_output_dir,
    is_affirmative,
    run_job,
    walk_files,
)

__all__ = [
    "DEFAULT_ENCODER_SETTINGS",
    "BatchResult",
    "EncoderSettings",
    "JobDescriptor",
    "__version__",
    "build_command",
    "build_job",
    "compress_videos",
    "delete_original_files",
    "ensure_output_dir",
    "is_affirmative",
    "run_job",
    "walk_files",
]
