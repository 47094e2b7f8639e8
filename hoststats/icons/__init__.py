from .renderer import IconRenderer, TextIconRenderer, build_icon_options

__all__ = [
    "IconRenderer",
    "TextIconRenderer",
    "build_icon_options",
]
