from .api import register_view_tools

__all__ = ["register_view_tools"]
