from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from autoclear.errors import DeleteFailed, MetadataUnreadable


@dataclass(frozen=True)
class CandidateFile:
    modified_time: datetime
    path: Path


class FilterOutcome(enum.Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"
    ERROR = "error"


@dataclass(frozen=True)
class EntryVerdict:
    outcome: FilterOutcome
    path: Path
    candidate: CandidateFile | None = None
    error: MetadataUnreadable | None = None


@dataclass(frozen=True)
class Partition:
    keep: tuple[CandidateFile, ...]
    remove: tuple[CandidateFile, ...]
    log: tuple[str, ...] = ()

    @classmethod
    def keep_all(cls, candidates: tuple[CandidateFile, ...], log: tuple[str, ...] = ()) -> Partition:
        return cls(keep=tuple(candidates), remove=(), log=log)


@dataclass
class ApplyResult:
    dry_run: bool
    removed: list[Path] = field(default_factory=list)
    failed: list[DeleteFailed] = field(default_factory=list)


@dataclass(frozen=True)
class RunReport:
    directory: Path
    prefix: str | None
    partition: Partition
    result: ApplyResult
