"""Resolved settings for one comparison run."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_DIRECTORY = "images"
DEFAULT_TOLERANCE = 5.0
DEFAULT_EXTENSION = "png"
DEFAULT_TIMEOUT_S = 120.0
ORIGINAL_SUBDIR = "original"
LATEST_SUBDIR = "latest"
MAX_TOLERANCE = 100.0


def default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class CompareConfig:
    """Settings consumed by :func:`ivc.runner.run`.

    Attributes:
        original_dir: Root of the baseline image tree.
        latest_dir: Root of the candidate image tree.
        tolerance: Largest squared Lab distance still counted as a
            matching pixel, 0-100 inclusive.
        extension: File extension to collect, without the leading dot.
        max_workers: Upper bound on pairs compared at once.
        timeout_s: Per-pair time limit in seconds, ``None`` for no limit.
        fail_fast: Abort on the first failing pair instead of recording
            it and carrying on.
    """

    original_dir: str
    latest_dir: str
    tolerance: float = DEFAULT_TOLERANCE
    extension: str = DEFAULT_EXTENSION
    max_workers: int = field(default_factory=default_workers)
    timeout_s: float | None = DEFAULT_TIMEOUT_S
    fail_fast: bool = True

    def __post_init__(self) -> None:
        if not 0.0 <= self.tolerance <= MAX_TOLERANCE:
            raise ValueError(f"tolerance must be between 0 and 100, got {self.tolerance}")
        extension = self.extension.lstrip(".")
        if not extension:
            raise ValueError("extension must not be empty")
        object.__setattr__(self, "extension", extension)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")

    @classmethod
    def from_directory(cls, directory: str = DEFAULT_DIRECTORY, **kwargs: object) -> CompareConfig:
        """Build a config whose roots are ``<directory>/original`` and ``<directory>/latest``."""
        return cls(
            original_dir=os.path.join(directory, ORIGINAL_SUBDIR),
            latest_dir=os.path.join(directory, LATEST_SUBDIR),
            **kwargs,  # type: ignore[arg-type]
        )
