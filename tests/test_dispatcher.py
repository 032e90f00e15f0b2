"""Tests for the closed command set and its dispatcher."""

import json
from typing import Callable

import pytest

from conftest import FakeFaucet, RecordingConfirmer
from core.commands import TOOL_VARIANTS, CliCommand, FundAccount, InfoTool, execute_tool
from core.config import AppSettings
from core.domain.errors import TransportError


def _variant_factories(settings: AppSettings) -> dict[type, Callable[[], CliCommand]]:
    return {
        FundAccount: lambda: FundAccount(
            account="0xABC",
            num_coins=7,
            settings=settings,
            faucet=FakeFaucet(ids=["T1"]),
            confirmer=RecordingConfirmer(),
        ),
        InfoTool: InfoTool,
    }


def test_every_variant_has_a_factory(settings: AppSettings) -> None:
    """Guards the enumeration below: a new variant must be added here too."""
    assert set(_variant_factories(settings)) == set(TOOL_VARIANTS)


def test_variant_names_are_distinct(settings: AppSettings) -> None:
    names = [factory().name() for factory in _variant_factories(settings).values()]

    assert sorted(names) == ["FundAccount", "GetCLIInfo"]


@pytest.mark.asyncio
@pytest.mark.parametrize("variant", TOOL_VARIANTS, ids=lambda v: v.__name__)
async def test_each_variant_dispatches(settings: AppSettings, variant: type) -> None:
    tool = _variant_factories(settings)[variant]()

    output = await execute_tool(tool)

    assert "Result" in json.loads(output)


@pytest.mark.asyncio
async def test_dispatch_fund_account_result(settings: AppSettings) -> None:
    output = await execute_tool(_variant_factories(settings)[FundAccount]())

    assert json.loads(output) == {"Result": "Added 7 coins to account 0xABC"}


@pytest.mark.asyncio
async def test_dispatcher_forwards_errors_unchanged(settings: AppSettings) -> None:
    error = TransportError("faucet down")
    tool = FundAccount(
        account="0x1",
        settings=settings,
        faucet=FakeFaucet(error=error),
        confirmer=RecordingConfirmer(),
    )

    with pytest.raises(TransportError) as exc_info:
        await execute_tool(tool)

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_unknown_variant_is_rejected() -> None:
    with pytest.raises(AssertionError):
        await execute_tool(object())  # type: ignore[arg-type]
