"""Classified errors returned by CLI commands.

Every failure that reaches the user is a `CliError`. Adapters translate
transport exceptions (httpx) into this taxonomy at the boundary, so the
command layer and the dispatcher never see library exceptions.
"""

from __future__ import annotations


class CliError(Exception):
    """Base class for every classified command failure."""

    kind = "CliError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        """Single-line description shown to the user."""

        return f"{self.kind}: {self.message}"


class TransportError(CliError):
    """Network/IO failure talking to the faucet or the REST endpoint."""

    kind = "TransportError"


class ApiError(TransportError):
    """The endpoint answered, but with an error status or unusable body."""

    kind = "ApiError"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfirmationTimeoutError(CliError):
    """The shared deadline elapsed before a transaction was confirmed."""

    kind = "TimeoutError"

    def __init__(self, txn_id: str, deadline_epoch_seconds: int) -> None:
        super().__init__(
            f"transaction {txn_id} was not confirmed before deadline {deadline_epoch_seconds}"
        )
        self.txn_id = txn_id
        self.deadline_epoch_seconds = deadline_epoch_seconds


class UnexpectedError(CliError):
    kind = "UnexpectedError"


class CommandArgumentError(CliError):
    kind = "CommandArgumentError"


class ConfigNotFoundError(CliError):
    kind = "ConfigNotFoundError"
