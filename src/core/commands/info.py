"""Show build information about the CLI.

Useful for debugging, and for telling which network versions the CLI is
compatible with.
"""

from __future__ import annotations

from typing import ClassVar

from core.build_info import collect_build_information
from core.commands.base import CliCommand


class InfoTool(CliCommand[dict[str, str]]):
    command_name: ClassVar[str] = "GetCLIInfo"

    async def _execute(self) -> dict[str, str]:
        return collect_build_information()
