from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from autoclear.executor import apply_partition
from autoclear.models import Partition, RunReport
from autoclear.scanner import scan_directory
from autoclear.selector import DEFAULT_STRATEGY, order_candidates, retention_boundaries, select

logger = logging.getLogger(__name__)


def clear_old_files(
    directory: Path,
    prefix: str | None,
    dry_run: bool,
    now: datetime | None = None,
    strategy: str = DEFAULT_STRATEGY,
) -> RunReport:
    """Scan ``directory``, decide what to remove and apply the decision.

    Without a prefix nothing is selected for removal: the run only reports
    that it would clear the whole directory. Raises ``DirectoryUnreadable``
    when the directory cannot be listed.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    candidates = scan_directory(directory, prefix)

    if prefix is not None:
        print(f"clearing files with prefix: '{prefix}'")
        partition = select(candidates, retention_boundaries(now), strategy=strategy)
    else:
        print("clearing all files in directory")
        partition = Partition.keep_all(order_candidates(candidates))

    for line in partition.log:
        logger.debug(line)

    result = apply_partition(partition, dry_run=dry_run)
    logger.debug(
        "Kept %d, removed %d, failed %d",
        len(partition.keep),
        len(result.removed),
        len(result.failed),
    )
    return RunReport(directory=directory, prefix=prefix, partition=partition, result=result)
