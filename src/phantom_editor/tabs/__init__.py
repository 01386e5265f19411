"""Tab lifecycle: per-tab state and the tab collection."""

from .manager import TabManager
from .tab import UNTITLED, Tab, Transaction

__all__ = ["Tab", "TabManager", "Transaction", "UNTITLED"]
