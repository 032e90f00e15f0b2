"""Command contract shared by every CLI subcommand.

Why a common base:
- Each subcommand has its own input fields and its own payload type, but
  the dispatcher, the logging and the output format must not care.
- Commands are frozen Pydantic models: inputs are validated once at
  construction and never change afterwards.

Rules:
- `execute` consumes the command: a second call raises `UnexpectedError`.
- Failures are raised as `CliError` subclasses and are never translated on
  the way out.
"""

from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, PrivateAttr
from pydantic.config import ConfigDict
from pydantic_core import to_jsonable_python

from core.domain.errors import CliError, UnexpectedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def serialize_result(payload: Any) -> str:
    """Uniform success document: `{"Result": <payload>}`."""

    return json.dumps({"Result": to_jsonable_python(payload)}, ensure_ascii=False, indent=2)


def serialize_error(error: CliError) -> str:
    """Uniform failure document: `{"Error": "<Kind>: <message>"}`."""

    return json.dumps({"Error": error.describe()}, ensure_ascii=False, indent=2)


class CliCommand(BaseModel, ABC, Generic[T]):
    """Base class for a subcommand producing a payload of type `T`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    command_name: ClassVar[str]

    _consumed: bool = PrivateAttr(default=False)

    def name(self) -> str:
        """Stable identifier used in logs."""

        return self.command_name

    @abstractmethod
    async def _execute(self) -> T:
        """Command body; subclasses implement this, callers use `execute`."""

    async def execute(self) -> T:
        if self._consumed:
            raise UnexpectedError(f"{self.name()} has already been executed")
        self._consumed = True
        return await self._execute()

    async def execute_and_serialize(self) -> str:
        started = time.monotonic()
        try:
            payload = await self.execute()
        except CliError as exc:
            logger.info(
                "%s failed after %.2fs: %s", self.name(), time.monotonic() - started, exc.describe()
            )
            raise
        logger.info("%s succeeded after %.2fs", self.name(), time.monotonic() - started)
        return serialize_result(payload)
