from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from autoclear.errors import DirectoryUnreadable, MetadataUnreadable
from autoclear.models import CandidateFile, EntryVerdict, FilterOutcome

logger = logging.getLogger(__name__)


def scan_directory(directory: Path, prefix: str | None = None) -> list[CandidateFile]:
    """Return a candidate for every entry directly inside ``directory``.

    Entries whose name does not start with ``prefix`` are skipped. Entries whose
    metadata cannot be read are dropped without surfacing an error. Only a
    failure to list the directory itself is raised, as ``DirectoryUnreadable``.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DirectoryUnreadable(directory, exc.strerror or str(exc)) from exc

    candidates: list[CandidateFile] = []
    for path in entries:
        verdict = classify_entry(path, prefix)
        if verdict.outcome is FilterOutcome.INCLUDE and verdict.candidate is not None:
            candidates.append(verdict.candidate)
        elif verdict.outcome is FilterOutcome.ERROR:
            logger.debug("Skipping %s: %s", path, verdict.error)
    logger.debug("Scanned %s: %d candidate(s)", directory, len(candidates))
    return candidates


def classify_entry(path: Path, prefix: str | None) -> EntryVerdict:
    if prefix and not path.name.startswith(prefix):
        return EntryVerdict(FilterOutcome.EXCLUDE, path)
    try:
        st = _stat(path)
    except OSError as exc:
        error = MetadataUnreadable(path, exc.strerror or str(exc))
        return EntryVerdict(FilterOutcome.ERROR, path, error=error)
    candidate = CandidateFile(
        modified_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        path=path,
    )
    return EntryVerdict(FilterOutcome.INCLUDE, path, candidate=candidate)


def _stat(path: Path) -> os.stat_result:
    return path.stat()
