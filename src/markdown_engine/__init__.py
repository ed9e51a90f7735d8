"""UI-agnostic markdown formatting engine."""

__all__ = [
    "adapters",
    "buffer",
    "format",
    "handlers",
    "keymaps",
    "render",
    "runtime",
    "settings",
    "tables",
]

__version__ = "0.1.0"
