"""Key handlers that edit a surface directly."""

from .enter import EnterResult, handle_enter, handle_enter_for_lists

__all__ = ["EnterResult", "handle_enter", "handle_enter_for_lists"]
