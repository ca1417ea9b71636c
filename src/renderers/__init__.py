from renderers.base import (
    BaseRenderer, RendererFactory, ColorScheme, OutputWriter, OutputTarget,
    DisplayOptions, PatchOptions
)
from renderers.line_diff import SubLineDiffer
from renderers.display import DisplayRenderer
from renderers.patch import PatchRenderer, format_timestamp


__all__ = [
    "BaseRenderer", "RendererFactory", "ColorScheme", "OutputWriter", "OutputTarget",
    "DisplayOptions", "PatchOptions", "SubLineDiffer", "DisplayRenderer",
    "PatchRenderer", "format_timestamp",
]


def create_renderer(name: str, *args, **kwargs) -> BaseRenderer:
    return RendererFactory.create(name, *args, **kwargs)


def get_available_renderers():
    return RendererFactory.available()
