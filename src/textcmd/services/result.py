"""ServiceResult and ServiceError — what every command execution returns.

INVARIANT: CommandDispatcher.execute always returns a ServiceResult or
raises. A skipped command (unavailable, selection changed) is ``ok=True``
with ``executed``/``written`` flags in ``data``, never an error.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one command execution.

    Attributes:
        ok: Whether the command completed (skips count as completed).
        op: Command identifier (e.g. ``"sort-lines"``).
        data: Command-specific payload.
        warnings: Non-fatal issues, written to stderr by the CLI.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (edit label, line counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def skipped(cls, op: str, reason: str, **data: Any) -> ServiceResult:
        """A no-op outcome: the command did not run or did not write."""
        return cls(ok=True, op=op, data={"executed": False, "written": False, "reason": reason, **data})

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
