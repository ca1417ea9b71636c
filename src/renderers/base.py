from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict
from enum import Enum
import sys

from hunks.hunk import Hunk, CompareResult


class OutputTarget(Enum):
    STREAM = "stream"
    STRING = "string"


class DisplayOptions:
    """Options of the console display form.

    ``offset`` shifts every displayed position, for results computed over
    a slice of a larger file. ``message`` is printed once before the hunks
    of a non-empty result.
    """

    def __init__(self, offset: int = 0, message: Optional[str] = None, use_color: bool = True):
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        self.offset = offset
        self.message = message
        self.use_color = use_color

    def copy(self) -> 'DisplayOptions':
        return DisplayOptions(offset=self.offset, message=self.message, use_color=self.use_color)

    def with_offset(self, offset: int) -> 'DisplayOptions':
        cfg = self.copy()
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        cfg.offset = offset
        return cfg

    def with_message(self, message: Optional[str]) -> 'DisplayOptions':
        cfg = self.copy()
        cfg.message = message
        return cfg

    def with_color(self, use_color: bool) -> 'DisplayOptions':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg


class PatchOptions:
    # files count lines from 1, hunks from 0
    def __init__(self, offset: int = 1):
        self.offset = offset

    def copy(self) -> 'PatchOptions':
        return PatchOptions(offset=self.offset)

    def with_offset(self, offset: int) -> 'PatchOptions':
        cfg = self.copy()
        cfg.offset = offset
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.dim = '\033[2m'
        self.reverse = '\033[7m'
        self.black = '\033[30m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.bg_black = '\033[40m'
        self.bg_red = '\033[41m'
        self.bg_green = '\033[42m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.dim = ''
        self.reverse = ''
        self.black = ''
        self.red = ''
        self.green = ''
        self.bg_black = ''
        self.bg_red = ''
        self.bg_green = ''

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme

    def paint(self, text: str, *codes: str) -> str:
        prefix = ''.join(codes)
        if not prefix:
            return text
        return f"{prefix}{text}{self.reset}"


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STRING, output: Optional[TextIO] = None):
        self.target = target
        self._output = output or sys.stdout
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)

    def flush(self):
        if self.target != OutputTarget.STRING:
            self._output.flush()


class BaseRenderer(ABC):
    def __init__(self, use_color: bool = True):
        self.colors = ColorScheme() if use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None

    def render(self, result: CompareResult, output: Optional[TextIO] = None) -> str:
        return self._run(self._render_result, result, output)

    def render_hunk(self, hunk: Hunk, output: Optional[TextIO] = None) -> str:
        return self._run(self._render_hunk, hunk, output)

    def _run(self, impl, value, output: Optional[TextIO]) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.STREAM, output)
        impl(value)
        if output is None:
            return self.writer.get_output()
        self.writer.flush()
        return ""

    @abstractmethod
    def _render_result(self, result: CompareResult):
        pass

    @abstractmethod
    def _render_hunk(self, hunk: Hunk):
        pass

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


class RendererFactory:
    _renderers: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, renderer_class: type):
        cls._renderers[name] = renderer_class

    @classmethod
    def create(cls, name: str, *args, **kwargs) -> BaseRenderer:
        if name not in cls._renderers:
            raise ValueError(f"Unknown renderer: {name}")
        return cls._renderers[name](*args, **kwargs)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._renderers.keys())
