"""Output directory handling for emitters."""

import shutil
from pathlib import Path

from napiway.errors import GenerationError


def clear_output_dir(directory: Path) -> None:
    """Remove ``directory`` with all its content and create it again, empty.

    Not safe to run concurrently for the same directory.
    """
    try:
        if directory.exists():
            shutil.rmtree(directory)
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GenerationError(f"failed to clear output directory {directory}: {e}") from e


def write_files(directory: Path, files: dict[str, str]) -> list[Path]:
    """Write ``{relative path: content}`` under ``directory``. Returns the written paths."""
    written = []
    for rel_path, content in files.items():
        file_path = directory / rel_path
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GenerationError(f"failed to write file {file_path}: {e}") from e
        written.append(file_path)
    return written
