"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Command inputs are validated once, at construction, and frozen afterwards.
- Profiles and option records share one serializable shape between the
  config file and the commands.

Note:
- These models describe *what* the inputs are, not *how* they are fetched.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Callable, NewType

from pydantic import AfterValidator, BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import CommandArgumentError, ConfigNotFoundError, UnexpectedError

if TYPE_CHECKING:
    from core.config import AppSettings


DEFAULT_PROFILE = "default"

_ADDRESS_RE = re.compile(r"^(0[xX])?([0-9a-fA-F]{1,64})$")


def _validate_address(value: str) -> str:
    value = value.strip()
    if not _ADDRESS_RE.match(value):
        raise ValueError(f"invalid account address: {value!r} (expected up to 64 hex digits)")
    return value


AccountAddress = Annotated[str, AfterValidator(_validate_address)]
"""Hex account address, kept in the textual form the user supplied."""

PendingTransactionId = NewType("PendingTransactionId", str)
"""Opaque handle (transaction hash) of a submitted, unconfirmed transaction."""


def is_account_address(value: str) -> bool:
    return bool(_ADDRESS_RE.match(value.strip()))


def canonical_address(address: str) -> str:
    """`0x` + 64 lowercase hex digits, the form the network endpoints expect."""

    match = _ADDRESS_RE.match(address.strip())
    if match is None:
        raise ValueError(f"invalid account address: {address!r}")
    return "0x" + match.group(2).lower().rjust(64, "0")


@dataclass(frozen=True)
class Deadline:
    """Absolute wall-clock cutoff, in whole seconds since the epoch.

    Computed once per funding operation and shared read-only by every
    confirmation poll of that operation.
    """

    epoch_seconds: int

    @classmethod
    def after(cls, grace_seconds: int, clock: Callable[[], float] = time.time) -> "Deadline":
        try:
            now = clock()
        except (OSError, OverflowError, ValueError) as exc:
            raise UnexpectedError(f"unable to read the system clock: {exc}") from exc
        if now < 0:
            raise UnexpectedError("system clock is before the UNIX epoch")
        return cls(int(now) + grace_seconds)

    def expired(self, now: float) -> bool:
        return now >= self.epoch_seconds

    def remaining(self, now: float) -> float:
        return max(0.0, self.epoch_seconds - now)


class ProfileConfig(BaseModel):
    """One named network profile from the CLI config file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    account: AccountAddress | None = Field(
        default=None,
        description="Account address owned by this profile.",
    )
    rest_url: str | None = Field(
        default=None,
        description="Fullnode REST endpoint.",
    )
    faucet_url: str | None = Field(
        default=None,
        description="Faucet endpoint (test networks only).",
    )


class CliConfig(BaseModel):
    """Contents of the CLI config file: a mapping of profile name -> profile."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    profiles: dict[str, ProfileConfig] = Field(default_factory=dict)

    def profile(self, name: str) -> ProfileConfig | None:
        """Look up a profile.

        The default profile may be absent (built-in network defaults apply);
        any other missing name is a configuration error.
        """

        found = self.profiles.get(name)
        if found is None and name != DEFAULT_PROFILE:
            raise ConfigNotFoundError(f"profile {name!r} not found in the CLI config")
        return found


class ProfileOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: str = Field(default=DEFAULT_PROFILE, min_length=1)


class FaucetOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    faucet_url: str | None = Field(
        default=None,
        description="Explicit faucet URL; overrides the profile.",
    )

    def resolve_faucet_url(self, profile: str, config: CliConfig, settings: "AppSettings") -> str:
        """Flag > profile > settings default."""

        if self.faucet_url:
            return self.faucet_url
        found = config.profile(profile)
        if found is not None and found.faucet_url:
            return found.faucet_url
        if settings.default_faucet_url:
            return settings.default_faucet_url
        raise CommandArgumentError(
            f"no faucet URL given and profile {profile!r} has none configured"
        )


class RestOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str | None = Field(
        default=None,
        description="Explicit REST endpoint; overrides the profile.",
    )

    def resolve_rest_url(self, profile: str, config: CliConfig, settings: "AppSettings") -> str:
        """Flag > profile > settings default."""

        if self.url:
            return self.url
        found = config.profile(profile)
        if found is not None and found.rest_url:
            return found.rest_url
        if settings.default_rest_url:
            return settings.default_rest_url
        raise CommandArgumentError(
            f"no REST URL given and profile {profile!r} has none configured"
        )
