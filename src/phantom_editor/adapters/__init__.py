"""Host adapters that put the editor engine on a screen."""
