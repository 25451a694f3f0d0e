"""
Tools para el calendario del grupo
"""

from langchain_core.tools import BaseTool

from ..container import Container
from .availability import build_availability_tools
from .events import build_event_tools


def build_tools(container: Container) -> list[BaseTool]:
    """Builds every tool bound to the given container."""
    return [*build_availability_tools(container), *build_event_tools(container)]


__all__ = [
    "build_tools",
    "build_availability_tools",
    "build_event_tools",
]
