"""Top-level dispatch over the closed set of CLI commands.

`Tool` lists every variant. `execute_tool` must handle each of them: the
trailing `assert_never` makes a type checker reject the chain as soon as a
variant is added to `Tool` without a branch here.
"""

from __future__ import annotations

from typing import Union, assert_never, get_args

from core.commands.account import FundAccount
from core.commands.info import InfoTool

Tool = Union[FundAccount, InfoTool]

TOOL_VARIANTS: tuple[type, ...] = get_args(Tool)


async def execute_tool(tool: Tool) -> str:
    """Run the selected command and return its serialized result.

    Errors from the command propagate unchanged.
    """

    if isinstance(tool, FundAccount):
        return await tool.execute_and_serialize()
    if isinstance(tool, InfoTool):
        return await tool.execute_and_serialize()
    assert_never(tool)
