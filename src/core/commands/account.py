"""Account commands."""

from __future__ import annotations

import time
from typing import Callable, ClassVar

from pydantic import Field

from adapters.faucet_client import HttpFaucetClient
from adapters.rest_client import RestClient
from core.commands.base import CliCommand
from core.config import AppSettings
from core.domain.models import (
    AccountAddress,
    CliConfig,
    FaucetOptions,
    ProfileOptions,
    RestOptions,
)
from core.interfaces.confirmation import ConfirmationClient
from core.interfaces.faucet import FaucetClient
from core.services.funding import FundingRequest, fund_and_confirm

DEFAULT_FUNDED_COINS = 10_000

_U64_MAX = 2**64 - 1


class FundAccount(CliCommand[str]):
    """Fund an account with coins from a faucet and wait until they land."""

    command_name: ClassVar[str] = "FundAccount"

    profile_options: ProfileOptions = Field(default_factory=ProfileOptions)
    account: AccountAddress = Field(
        ...,
        description="Address to fund.",
    )
    faucet_options: FaucetOptions = Field(default_factory=FaucetOptions)
    num_coins: int = Field(
        default=DEFAULT_FUNDED_COINS,
        ge=0,
        le=_U64_MAX,
        description="Coins to request from the faucet.",
    )
    rest_options: RestOptions = Field(default_factory=RestOptions)

    config: CliConfig = Field(default_factory=CliConfig, repr=False)
    settings: AppSettings = Field(default_factory=AppSettings, repr=False)

    # Collaborators; the HTTP adapters are used when left unset.
    faucet: FaucetClient | None = Field(default=None, exclude=True, repr=False)
    confirmer: ConfirmationClient | None = Field(default=None, exclude=True, repr=False)
    clock: Callable[[], float] = Field(default=time.time, exclude=True, repr=False)

    async def _execute(self) -> str:
        profile = self.profile_options.profile
        faucet_url = self.faucet_options.resolve_faucet_url(profile, self.config, self.settings)

        faucet = self.faucet or HttpFaucetClient(self.settings)
        confirmer = self.confirmer
        if confirmer is None:
            rest_url = self.rest_options.resolve_rest_url(profile, self.config, self.settings)
            confirmer = RestClient(rest_url, self.settings)

        await fund_and_confirm(
            FundingRequest(faucet_url=faucet_url, amount=self.num_coins, address=self.account),
            faucet=faucet,
            confirmer=confirmer,
            clock=self.clock,
        )
        return f"Added {self.num_coins} coins to account {self.account}"
