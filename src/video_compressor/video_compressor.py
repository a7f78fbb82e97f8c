import os
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import click
from loguru import logger
from tqdm import tqdm

LOG_SUFFIX = ".log"

DELETE_PROMPT = "Do you want to delete the original files? (Y/N): "


@dataclass(frozen=True)
class EncoderSettings:
    binary: str = "ffmpeg"
    video_codec: str = "hevc_nvenc"
    preset: str = "fast"
    crf: int = 28

    def arguments(self, source: Path, output: Path) -> list[str]:
        return [
            self.binary,
            "-i",
            str(source),
            "-movflags",
            "use_metadata_tags",
            "-map_metadata",
            "0",
            "-vcodec",
            self.video_codec,
            "-preset",
            self.preset,
            "-crf",
            str(self.crf),
            "-c:a",
            "copy",
            str(output),
        ]


DEFAULT_ENCODER_SETTINGS = EncoderSettings()


@dataclass(frozen=True)
class JobDescriptor:
    source_path: Path
    output_path: Path
    log_path: Path


@dataclass
class BatchResult:
    total: int = 0
    completed: int = 0
    failed: list[Path] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.completed + len(self.failed)


def match_file(path: Path) -> bool:
    # os.path.isfile swallows stat errors, so broken links come back False
    if os.path.islink(path):
        return False

    return os.path.isfile(path)


def walk_files(
    root: Path,
    predicate: Callable[[Path], bool] = match_file,
) -> list[Path]:
    files: list[Path] = []
    # Unreadable directories are skipped: os.walk ignores errors without onerror
    for dirpath, _dirnames, filenames in os.walk(root):
        files.extend(
            path
            for path in (Path(dirpath) / name for name in filenames)
            if predicate(path)
        )
    return files


def ensure_output_dir(output_root: Path) -> None:
    output_root.mkdir(parents=True, exist_ok=True)


def build_job(source_path: Path, output_root: Path) -> JobDescriptor:
    output_path = output_root / source_path.name
    return JobDescriptor(
        source_path=source_path,
        output_path=output_path,
        log_path=output_path.with_suffix(LOG_SUFFIX),
    )


def build_command(
    job: JobDescriptor,
    settings: EncoderSettings = DEFAULT_ENCODER_SETTINGS,
) -> list[str]:
    return settings.arguments(job.source_path, job.output_path)


def run_job(
    job: JobDescriptor,
    settings: EncoderSettings = DEFAULT_ENCODER_SETTINGS,
) -> bool:
    cmd = build_command(job, settings)
    logger.debug(f"Running {' '.join(cmd)} (log: {job.log_path})")

    with job.log_path.open("wb") as log_file:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=log_file,
            stderr=subprocess.STDOUT,
            check=False,
        )

    if result.returncode != 0:
        logger.debug(f"{settings.binary} exited with status {result.returncode}")
        return False

    return True


def compress_videos(
    input_dir: Path,
    output_dir: Path,
    runner: Callable[[JobDescriptor], bool] = run_job,
) -> BatchResult:
    ensure_output_dir(output_dir)
    logger.info(f"Writing compressed files to {output_dir}")

    video_files = walk_files(input_dir)
    if not video_files:
        click.echo("No video files found in the input directory.", err=True)
        return BatchResult()

    logger.info(f"Found {len(video_files)} files in {input_dir}")
    result = BatchResult(total=len(video_files))

    with tqdm(total=result.total, desc="Compressing", unit="file") as progress:
        for video_file in video_files:
            job = build_job(video_file, output_dir)
            if runner(job):
                result.completed += 1
                progress.update(1)
            else:
                result.failed.append(video_file)
                logger.error(f"Failed to process file: {video_file}")

    click.echo("Video compression completed.")
    return result


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() == "y"


def read_answer() -> str:
    click.echo(DELETE_PROMPT, nl=False)
    # EOF yields "", which is treated as a refusal
    return sys.stdin.readline()


def delete_original_files(
    video_files: list[Path],
    answer: Callable[[], str] = read_answer,
) -> list[Path]:
    if not video_files:
        return []

    if not is_affirmative(answer()):
        logger.debug("Keeping original files")
        return []

    deleted: list[Path] = []
    for video_file in video_files:
        video_file.unlink()
        deleted.append(video_file)
        click.echo(f"Deleted file: {video_file}")

    click.echo("Original files deleted.")
    return deleted
