"""Textual host for the editor.

``controller`` has no Textual dependency and can be driven from tests;
``app`` holds the actual Textual application.
"""

from .controller import TextualEditorAdapter, TextualUIHooks, translate_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "translate_key"]
