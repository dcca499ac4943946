"""What every relayctl service call returns.

Expected failures (unknown user, duplicate user, bad connection id, a
handler that raised) come back as ``ok=False`` results carrying a
:class:`ServiceError`; services do not raise them. The CLI renders these
results and maps ``ok=False`` to exit code 1.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable ``code``, human ``message``, and the ids involved."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    ``op`` names the operation and selects the renderer. ``warnings`` holds
    non-fatal problems such as a failing plugin hook and may be present on
    successful results.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None


def succeeded(op: str, data: dict[str, Any], warnings: list[str] | None = None) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
