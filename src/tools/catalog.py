"""Tool catalog: ordered descriptors and the name -> handler dispatch table.

Both mappings are built from the same module tuple so that every
registered tool has exactly one descriptor and one handler.
"""

from __future__ import annotations

from functools import partial
from typing import Dict

from core.dispatch import Handler, ToolDispatcher
from core.interfaces import ToolContext
from core.models import ToolDescriptor
from tools import (
    get_complete_documentation,
    get_file_content,
    get_medium_article,
    get_project_files,
    get_readme,
    search_docs,
)

TOOL_MODULES = (
    get_readme,
    get_project_files,
    get_file_content,
    search_docs,
    get_medium_article,
    get_complete_documentation,
)

TOOL_DESCRIPTORS: Dict[str, ToolDescriptor] = {m.NAME: m.DESCRIPTOR for m in TOOL_MODULES}


def build_handlers(context: ToolContext) -> Dict[str, Handler]:
    return {m.NAME: partial(m.handle, context) for m in TOOL_MODULES}


def build_dispatcher(context: ToolContext) -> ToolDispatcher:
    handlers = build_handlers(context)
    if set(handlers) != set(TOOL_DESCRIPTORS):
        raise RuntimeError("Tool descriptors and handlers are out of sync")
    return ToolDispatcher(handlers)
