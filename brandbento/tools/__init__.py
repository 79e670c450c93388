"""brandbento.tools package

Command-line helpers around the engine (palette mapping, token export,
document validation).

Keep this package's __init__ free of eager imports so `python -m
brandbento.tools.<name>` has no import-time side effects.
"""

__all__: list[str] = []
