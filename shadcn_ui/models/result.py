"""Workflow result models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ComponentStatus(str, Enum):
    """Outcome of a workflow for a single component."""

    ADDED = "added"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    UPDATED = "updated"
    DECLINED = "declined"
    REMOVED = "removed"
    FAILED = "failed"


class ComponentResult(BaseModel):
    """Per-component outcome reported back to the CLI."""

    name: str
    status: ComponentStatus
    message: Optional[str] = None
    files: List[str] = Field(default_factory=list)
    diff: Optional[str] = None
    local_version: Optional[str] = None
    registry_version: Optional[str] = None


class SyncSummary(BaseModel):
    """Accumulated results of one workflow invocation."""

    command: str
    results: List[ComponentResult] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    def record(self, result: ComponentResult) -> ComponentResult:
        self.results.append(result)
        return result

    def with_status(self, status: ComponentStatus) -> List[ComponentResult]:
        return [r for r in self.results if r.status == status]

    def counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for result in self.results:
            counts[result.status.value] = counts.get(result.status.value, 0) + 1
        return counts

    @property
    def has_failures(self) -> bool:
        return any(r.status == ComponentStatus.FAILED for r in self.results)
