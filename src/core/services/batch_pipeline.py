"""Batch validation orchestration.

This module validates many `(kind, value)` pairs in one call. Checksum
validations are pure and run inline; CEP validations perform a blocking
lookup, so they are pushed to worker threads and bounded by a semaphore.
The CLI only renders the result, which keeps the pipeline reusable for
future entry-points (APIs, batch jobs, tests).
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.models import FailureKind, IdentifierKind, ValidationOutcome
from core.interfaces.postal_resolver import PostalResolver
from core.validators import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchItem:
    """One value to validate."""

    kind: IdentifierKind
    value: str
    line_no: int | None = None


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress)."""

    start: Callable[[int], None] | None = None
    progress: Callable[[int, int, ValidationOutcome], None] | None = None


@dataclass
class BatchResult:
    """Output of a pipeline invocation, in input order."""

    items: list[BatchItem]
    outcomes: list[ValidationOutcome]
    failures_by_kind: Counter[FailureKind] = field(default_factory=Counter)

    @property
    def valid_count(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def invalid_count(self) -> int:
        return len(self.outcomes) - self.valid_count


async def run_batch(
    *,
    settings: AppSettings,
    items: Sequence[BatchItem],
    resolver: PostalResolver | None = None,
    hooks: PipelineHooks | None = None,
) -> BatchResult:
    hooks = hooks or PipelineHooks()
    total = len(items)
    sem = asyncio.Semaphore(max(1, settings.batch_max_concurrency))
    done = 0

    if resolver is None and any(i.kind is IdentifierKind.CEP for i in items):
        raise ValueError("batch contains CEP values but no postal resolver was given")

    if hooks.start:
        hooks.start(total)

    async def validate_one(item: BatchItem) -> ValidationOutcome:
        nonlocal done
        if item.kind is IdentifierKind.CEP:
            async with sem:
                outcome = await asyncio.to_thread(
                    validate,
                    item.kind,
                    item.value,
                    resolver=resolver,
                    language=settings.language,
                )
        else:
            outcome = validate(item.kind, item.value, language=settings.language)

        done += 1
        if hooks.progress:
            hooks.progress(done, total, outcome)
        return outcome

    outcomes = list(await asyncio.gather(*(validate_one(item) for item in items)))

    failures: Counter[FailureKind] = Counter(
        o.failure.kind for o in outcomes if o.failure is not None
    )
    logger.debug("batch finished: %d items, %d invalid", total, sum(failures.values()))
    return BatchResult(items=list(items), outcomes=outcomes, failures_by_kind=failures)
