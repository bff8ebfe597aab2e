"""Data models for the directcloud_uploader library."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Credentials:
    """Credentials exchanged for an access token."""

    service: str
    service_key: str
    code: str
    id: str
    password: str = field(repr=False)

    def as_form(self) -> dict[str, str]:
        """Form fields expected by the token endpoint."""
        return {
            "service": self.service,
            "service_key": self.service_key,
            "code": self.code,
            "id": self.id,
            "password": self.password,
        }


@dataclass(frozen=True)
class Session:
    """Authenticated session shared by every request of a run."""

    cookie: tuple[str, ...]
    access_token: str = field(repr=False)

    @property
    def cookie_header(self) -> str:
        """Cookie header built from the name=value part of each Set-Cookie."""
        return "; ".join(c.split(";", 1)[0].strip() for c in self.cookie if c)

    def headers(self) -> dict[str, str]:
        headers = {"access_token": self.access_token}
        if self.cookie:
            headers["Cookie"] = self.cookie_header
        return headers


class StepKind(enum.Enum):
    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    ABORT = "abort"


@dataclass(frozen=True)
class Step:
    """Outcome of one traversal step of the tree replicator."""

    kind: StepKind
    reason: str | None = None
    error: Exception | None = None

    @classmethod
    def proceed(cls) -> Step:
        return cls(StepKind.CONTINUE)

    @classmethod
    def skip(cls, reason: str) -> Step:
        return cls(StepKind.SKIP_SUBTREE, reason=reason)

    @classmethod
    def abort(cls, error: Exception) -> Step:
        return cls(StepKind.ABORT, reason=str(error), error=error)

    @property
    def is_abort(self) -> bool:
        return self.kind is StepKind.ABORT


@dataclass
class ReplicationReport:
    """Counters collected while mirroring a local tree."""

    folders_created: list[tuple[str, str]] = field(default_factory=list)
    files_uploaded: list[Path] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    """Overall outcome of one upload run."""

    success: bool
    error: str | None = None
    report: ReplicationReport | None = None
