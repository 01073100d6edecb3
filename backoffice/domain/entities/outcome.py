"""Result types returned by the user use cases."""

from dataclasses import dataclass, field

from .user import User


@dataclass(frozen=True)
class SideEffectOutcome:
    """Result of a best-effort step such as an email or an audit row."""

    name: str
    succeeded: bool
    detail: str | None = None


@dataclass
class UserOperationResult:
    """Primary change plus the best-effort steps that followed it.

    ``user`` holds the persisted account. Failures in ``side_effects`` never
    invalidate it.
    """

    user: User
    side_effects: list[SideEffectOutcome] = field(default_factory=list)

    @property
    def failed_side_effects(self) -> list[SideEffectOutcome]:
        return [outcome for outcome in self.side_effects if not outcome.succeeded]


@dataclass(frozen=True)
class ResetPasswordOutcome:
    """Either the user whose password was reset or the message to show."""

    user: User | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.user is not None

    @classmethod
    def success(cls, user: User) -> "ResetPasswordOutcome":
        return cls(user=user)

    @classmethod
    def failure(cls, message: str) -> "ResetPasswordOutcome":
        return cls(error=message)


__all__ = ["ResetPasswordOutcome", "SideEffectOutcome", "UserOperationResult"]
