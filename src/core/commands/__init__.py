"""CLI commands.

Each module holds one command family; `tool` ties them into the closed set
the CLI can dispatch to.
"""

from core.commands.account import DEFAULT_FUNDED_COINS, FundAccount
from core.commands.base import CliCommand, serialize_error, serialize_result
from core.commands.info import InfoTool
from core.commands.tool import TOOL_VARIANTS, Tool, execute_tool

__all__ = [
	"CliCommand",
	"DEFAULT_FUNDED_COINS",
	"FundAccount",
	"InfoTool",
	"TOOL_VARIANTS",
	"Tool",
	"execute_tool",
	"serialize_error",
	"serialize_result",
]
