from ui.widgets.romaji_line import RomajiLine

__all__ = ["RomajiLine"]
