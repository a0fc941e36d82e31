"""
The "graph" host command.

Wraps an InvocationBridge in the host's command contract: metadata for the
catalog, option binding and validation, and an execute() that always returns
a CommandResponse. Failures of any kind are logged and folded into the
response; nothing escapes to the host.
"""

import logging
import time
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from ..api.models import CommandInfo, CommandResponse, GraphOptions
from ..bridge.bridge import InvocationBridge
from ..bridge.mapper import classify

logger = logging.getLogger("graphbridge.command")

COMMAND_TITLE = "Microsoft Graph CLI Command"

COMMAND_DESCRIPTION = """\
Runs Microsoft Graph CLI (mgc) commands.
This tool can be used to manage Microsoft Graph resources, like users, groups, etc.

If unsure about available commands or their parameters, run mgc --help or mgc <group> --help in the command to discover them."""


class GraphCommand:
    """Host command that runs Microsoft Graph CLI sub-commands."""

    name = "graph"
    title = COMMAND_TITLE
    description = COMMAND_DESCRIPTION
    read_only = True
    destructive = False

    def __init__(self, bridge: InvocationBridge):
        self.bridge = bridge

    def describe(self) -> CommandInfo:
        """Catalog entry for this command."""
        options = {
            name: info.description or ""
            for name, info in GraphOptions.model_fields.items()
        }
        return CommandInfo(
            name=self.name,
            title=self.title,
            description=self.description,
            read_only=self.read_only,
            destructive=self.destructive,
            options=options,
        )

    def bind_options(self, raw: Optional[Mapping[str, Any]]) -> GraphOptions:
        """Bind raw option values (parsed args, JSON body) to GraphOptions."""
        return GraphOptions.model_validate(dict(raw or {}))

    def validate(self, options: GraphOptions) -> List[str]:
        """
        Validate bound options.

        Returns:
            List of error messages, empty when the options are valid
        """
        errors = []
        if options.command is None or not options.command.strip():
            errors.append("Missing Required options: --command")
        return errors

    def execute(self, options: GraphOptions) -> CommandResponse:
        """
        Run the command and build the response envelope.

        Args:
            options: Bound options

        Returns:
            CommandResponse with status 200, 400 or 500
        """
        response = CommandResponse()
        start_time = time.monotonic()

        try:
            errors = self.validate(options)
            if errors:
                response.status = 400
                response.message = "; ".join(errors)
                return response

            result = self.bridge.invoke(options.command)
            mapped = classify(result)

            response.results = mapped.payload
            if not mapped.succeeded:
                response.status = 500
                response.message = mapped.message or ""

        except Exception as e:
            logger.exception(f"An exception occurred executing command. Command: {options.command}.")
            self._handle_exception(response, e)

        finally:
            response.duration_ms = int((time.monotonic() - start_time) * 1000)

        return response

    def run(self, raw: Optional[Mapping[str, Any]]) -> CommandResponse:
        """Bind, validate and execute in one step."""
        try:
            options = self.bind_options(raw)
        except ValidationError as e:
            response = CommandResponse()
            self._handle_exception(response, e)
            return response
        return self.execute(options)

    @staticmethod
    def _handle_exception(response: CommandResponse, error: Exception) -> None:
        # pydantic's ValidationError is a ValueError
        response.status = 400 if isinstance(error, ValueError) else 500
        response.message = str(error)
