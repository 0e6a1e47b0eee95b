"""LangChain tool bindings: lets a chat model drive the canvas commands.

``command_tool_definitions`` produces OpenAI-style tool dicts that can be
passed to ``ChatModel.bind_tools``; ``run_tool_calls`` executes the tool calls
of a model response against a CanvasEngine and answers each with a
ToolMessage the model can read before its next step.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.messages import AIMessage, ToolMessage
from langchain_core.utils.function_calling import convert_to_openai_tool

from graphboard.engine.registry import CommandRegistry

if TYPE_CHECKING:
    from graphboard.engine.canvas import CanvasEngine

logger = logging.getLogger(__name__)


def command_tool_definitions(registry: CommandRegistry) -> list[dict[str, Any]]:
    """One tool per registered command, named exactly like the command."""
    tools = []
    for spec in registry.all():
        tool = convert_to_openai_tool(spec.params)
        tool["function"]["name"] = spec.name
        tool["function"]["description"] = spec.description
        tools.append(tool)
    return tools


async def run_tool_calls(engine: CanvasEngine, message: AIMessage) -> list[ToolMessage]:
    """Execute ``message.tool_calls`` one at a time, in order.

    Each call is awaited before the next one starts so a later call sees the
    graph state produced by earlier ones (e.g. vertices before edges).
    """
    replies: list[ToolMessage] = []
    for call in message.tool_calls:
        name = call["name"]
        result = await engine.execute(name, call.get("args") or {})
        logger.info("Tool call %s -> %s", name, result)
        replies.append(ToolMessage(content=result, tool_call_id=call.get("id") or "", name=name))
    return replies
