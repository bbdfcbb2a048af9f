"""Tool dispatch: name lookup plus the catch-and-convert error boundary.

Every outcome, including unknown tool names and unexpected handler
faults, leaves the dispatcher as a ToolResponse. Failures are text
envelopes starting with "Error: ", never protocol-level errors.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from core.errors import DocServerError, UnknownToolError
from core.models import ToolRequest, ToolResponse

logger = logging.getLogger(__name__)

Handler = Callable[[Mapping[str, Any]], Awaitable[str]]


class ToolDispatcher:
    def __init__(self, handlers: Mapping[str, Handler]) -> None:
        self._handlers: Dict[str, Handler] = dict(handlers)

    async def call_tool(self, request: ToolRequest) -> ToolResponse:
        handler = self._handlers.get(request.name)
        try:
            if handler is None:
                raise UnknownToolError(f"Unknown tool: {request.name}")
            text = await handler(dict(request.arguments or {}))
        except DocServerError as e:
            logger.warning("Tool %s failed: %s", request.name, e)
            return ToolResponse.failure(str(e))
        except Exception as e:
            logger.exception("Tool %s raised an unexpected error", request.name)
            return ToolResponse.failure(str(e) or type(e).__name__)

        return ToolResponse.success(text)

    async def call_text(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Dispatch and flatten the envelope to the text handed back to FastMCP."""
        response = await self.call_tool(ToolRequest(name=name, arguments=dict(arguments or {})))
        return response.text
