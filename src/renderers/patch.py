from datetime import datetime
from typing import Optional, Union

from hunks.hunk import Hunk, CompareResult
from renderers.base import BaseRenderer, PatchOptions, RendererFactory

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"

Timestamp = Union[str, datetime, None]


def format_timestamp(value: Timestamp) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value.strftime(TIMESTAMP_FORMAT)


class PatchRenderer(BaseRenderer):
    """Unified diff interchange format, suitable for ``patch -p0``."""

    def __init__(
        self,
        left_name: str,
        left_timestamp: Timestamp,
        right_name: str,
        right_timestamp: Timestamp,
        options: Optional[PatchOptions] = None
    ):
        super().__init__(use_color=False)
        self.left_name = left_name
        self.right_name = right_name
        self.left_timestamp = format_timestamp(left_timestamp)
        self.right_timestamp = format_timestamp(right_timestamp)
        self.options = options or PatchOptions()

    def _file_header(self, marker: str, name: str, timestamp: Optional[str]) -> str:
        if timestamp is None:
            return f"{marker} {name}"
        return f"{marker} {name}\t{timestamp}"

    def _render_result(self, result: CompareResult):
        self._writeln(self._file_header("---", self.left_name, self.left_timestamp))
        self._writeln(self._file_header("+++", self.right_name, self.right_timestamp))
        for hunk in result.hunks:
            self._render_hunk(hunk)

    def _render_hunk(self, hunk: Hunk):
        offset = self.options.offset
        self._writeln(f"@@ -{hunk.old_index + offset},{hunk.removed} "
                      f"+{hunk.new_index + offset},{hunk.inserted} @@")
        for line in hunk.lines:
            self._writeln(f"{line.sign}{line.content}")


RendererFactory.register("patch", PatchRenderer)
