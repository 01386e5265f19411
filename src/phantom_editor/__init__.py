"""Modal terminal text editor engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "editor",
    "keymaps",
    "modes",
    "runtime",
    "services",
    "tabs",
]

__version__ = "0.1.0"
