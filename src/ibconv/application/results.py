"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TaskStatus(str, Enum):
    """Outcome tag for a single conversion task."""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionTask:
    """Source image paired with its mirrored destination."""

    source_path: Path
    destination_path: Path


@dataclass(frozen=True)
class TaskOutcome:
    """Structured outcome for one eligible source file."""

    source_path: Path
    status: TaskStatus
    destination_path: Path | None = None
    reason: str | None = None


@dataclass(frozen=True)
class RunSummary:
    """Ordered outcomes of a conversion run."""

    outcomes: tuple[TaskOutcome, ...] = ()

    def _with_status(self, status: TaskStatus) -> tuple[TaskOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.status is status)

    @property
    def converted(self) -> tuple[TaskOutcome, ...]:
        return self._with_status(TaskStatus.CONVERTED)

    @property
    def skipped(self) -> tuple[TaskOutcome, ...]:
        return self._with_status(TaskStatus.SKIPPED)

    @property
    def failed(self) -> tuple[TaskOutcome, ...]:
        return self._with_status(TaskStatus.FAILED)
