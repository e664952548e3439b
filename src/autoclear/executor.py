from __future__ import annotations

import logging
from pathlib import Path

from autoclear.errors import DeleteFailed
from autoclear.models import ApplyResult, Partition

logger = logging.getLogger(__name__)


def apply_partition(partition: Partition, dry_run: bool) -> ApplyResult:
    """Delete every file on the REMOVE side, or only print them on a dry run.

    A failed delete is logged and recorded; the remaining files are still
    processed.
    """
    result = ApplyResult(dry_run=dry_run)
    if not dry_run:
        for candidate in partition.keep:
            logger.debug("keeping file: %s", candidate.path)

    for candidate in partition.remove:
        path = candidate.path
        if dry_run:
            print(f"remove file: {path}")
            continue
        try:
            remove_file(path)
        except DeleteFailed as exc:
            logger.error("%s", exc)
            result.failed.append(exc)
            continue
        result.removed.append(path)
    return result


def remove_file(path: Path) -> None:
    try:
        path.unlink()
    except OSError as exc:
        raise DeleteFailed(path, exc.strerror or str(exc)) from exc
