"""Error taxonomy shared by the transport client and the response decoders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import ValidationError

IssueKind = Literal["key_not_found", "value_not_found", "type_mismatch", "data_corrupted"]


class APIError(RuntimeError):
    """Base error for Brackets API calls."""


class InvalidURLError(APIError):
    """Raised when a request URL cannot be built."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = "Invalid URL"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidResponseError(APIError):
    """Raised on non-2xx statuses or bodies matching no tolerated shape."""

    def __init__(self, *, status_code: int | None = None, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        message = "Invalid response from server"
        if status_code is not None:
            message = f"{message} (status {status_code})"
        elif detail:
            message = f"{message}: {detail}"
        super().__init__(message)


@dataclass(frozen=True)
class DecodingIssue:
    """One structural mismatch found while decoding a response body."""

    kind: IssueKind
    path: tuple[str | int, ...]
    message: str
    found: Any = None

    @property
    def dotted_path(self) -> str:
        if not self.path:
            return "<root>"
        parts: list[str] = []
        for item in self.path:
            if isinstance(item, int):
                parts.append(f"[{item}]")
            elif parts:
                parts.append(f".{item}")
            else:
                parts.append(str(item))
        return "".join(parts)

    def describe(self) -> str:
        return f"{self.kind} at {self.dotted_path}: {self.message}"


def _issue_kind(error_type: str, found: Any) -> IssueKind:
    if error_type == "missing":
        return "key_not_found"
    if error_type in {"data_corrupted", "json_invalid"}:
        return "data_corrupted"
    if found is None:
        return "value_not_found"
    return "type_mismatch"


class DecodingError(APIError):
    """Raised when a body has a known shape but fails type validation."""

    def __init__(self, issues: tuple[DecodingIssue, ...] | list[DecodingIssue]) -> None:
        self.issues = tuple(issues)
        if self.issues:
            detail = self.issues[0].describe()
            extra = len(self.issues) - 1
            if extra > 0:
                detail = f"{detail} (+{extra} more)"
        else:
            detail = "unknown decoding failure"
        super().__init__(f"Failed to decode response: {detail}")

    @property
    def kinds(self) -> set[IssueKind]:
        return {issue.kind for issue in self.issues}

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, *, prefix: tuple[str | int, ...] = ()
    ) -> DecodingError:
        issues: list[DecodingIssue] = []
        for error in exc.errors(include_url=False):
            found = error.get("input")
            issues.append(
                DecodingIssue(
                    kind=_issue_kind(str(error.get("type", "")), found),
                    path=prefix + tuple(error.get("loc", ())),
                    message=str(error.get("msg", "")),
                    found=found,
                )
            )
        return cls(issues)


class NetworkError(APIError):
    """Raised on transport-level failures (connectivity, TLS, timeouts)."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Network error: {detail}")
