"""Command Line Interface for developing and interacting with the Aptos blockchain.

The CLI layer only parses arguments, resolves configuration and builds one
`Tool` variant; execution and output formatting belong to `core.commands`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import configure_logging, print_error, print_output
from core.commands import DEFAULT_FUNDED_COINS, FundAccount, InfoTool, Tool, execute_tool
from core.config import AppSettings, load_cli_config
from core.domain.errors import CliError
from core.domain.models import (
    DEFAULT_PROFILE,
    CliConfig,
    FaucetOptions,
    ProfileOptions,
    RestOptions,
    is_account_address,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="aptos",
    no_args_is_help=True,
    help="Command Line Interface (CLI) for developing and interacting with the Aptos blockchain.",
)
account_app = typer.Typer(no_args_is_help=True, help="Tool for interacting with accounts.")
app.add_typer(account_app, name="account")

_console = Console()
_err_console = Console(stderr=True)


@dataclass(frozen=True)
class GlobalOptions:
    """Flags shared by every subcommand, captured by the root callback."""

    settings: AppSettings
    profile: str = DEFAULT_PROFILE
    url: str | None = None
    faucet_url: str | None = None


def _run_tool(tool: Tool) -> None:
    try:
        output = asyncio.run(execute_tool(tool))
    except CliError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    print_output(_console, output)


def _load_config(options: GlobalOptions) -> CliConfig:
    try:
        return load_cli_config(options.settings.resolved_config_path())
    except CliError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


def load_account_arg(value: str, config: CliConfig) -> str:
    """Accept either a hex address or the name of a profile that owns one."""

    value = value.strip()
    if is_account_address(value):
        return value
    profile = config.profiles.get(value)
    if profile is not None and profile.account:
        return profile.account
    raise typer.BadParameter(f"{value!r} is neither an account address nor a profile with an account")


@app.callback()
def main(
    ctx: typer.Context,
    profile: str = typer.Option(DEFAULT_PROFILE, "--profile", help="Profile to use from the CLI config."),
    url: Optional[str] = typer.Option(None, "--url", help="REST endpoint; overrides the profile."),
    faucet_url: Optional[str] = typer.Option(
        None, "--faucet-url", help="Faucet endpoint; overrides the profile."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid APTOS_* environment settings: {exc}") from exc

    configure_logging(logging.DEBUG if verbose else settings.log_level, _err_console)
    ctx.obj = GlobalOptions(settings=settings, profile=profile, url=url, faucet_url=faucet_url)


@account_app.command("fund")
def fund(
    ctx: typer.Context,
    account: str = typer.Option(..., "--account", help="Address to fund, or a profile name."),
    num_coins: int = typer.Option(
        DEFAULT_FUNDED_COINS, "--num-coins", min=0, help="Coins to fund when using the faucet."
    ),
) -> None:
    """Fund an account with coins from a faucet and wait for confirmation."""

    options: GlobalOptions = ctx.obj
    config = _load_config(options)
    address = load_account_arg(account, config)

    try:
        tool = FundAccount(
            profile_options=ProfileOptions(profile=options.profile),
            account=address,
            faucet_options=FaucetOptions(faucet_url=options.faucet_url),
            num_coins=num_coins,
            rest_options=RestOptions(url=options.url),
            config=config,
            settings=options.settings,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.debug("Dispatching %s", tool.name())
    _run_tool(tool)


@app.command("info")
def info() -> None:
    """Show build information about the CLI."""

    _run_tool(InfoTool())


def run() -> None:
    app(prog_name="aptos")


if __name__ == "__main__":
    run()
