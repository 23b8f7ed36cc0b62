"""Tools exposed over MCP."""

from .browser_session import BrowserSession
from .loader import build_registry, load_tools

__all__ = ["BrowserSession", "build_registry", "load_tools"]
