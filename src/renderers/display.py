from typing import Optional

from hunks.hunk import Hunk, CompareResult
from hunks.line import LineKind, LineRecord
from hunks.pairing import ReplacePairing
from renderers.base import BaseRenderer, DisplayOptions, RendererFactory
from renderers.line_diff import SubLineDiffer


class DisplayRenderer(BaseRenderer):
    """Console form: position columns, signs and ANSI colors.

    ::

        ... ...   @@ -124,10 +124,10 @@
        124 124   bar
        125      -foo
            129  +bar
    """

    def __init__(self, options: Optional[DisplayOptions] = None):
        self.options = options or DisplayOptions()
        super().__init__(self.options.use_color)
        self.sub_line = SubLineDiffer(self.colors)

    def _render_result(self, result: CompareResult):
        if result.is_empty():
            return
        if self.options.message is not None:
            self._write(f"\n{self.options.message}\n\n")
        for n, hunk in enumerate(result.hunks):
            if n:
                self._writeln()
            self._render_hunk(hunk)

    def _render_hunk(self, hunk: Hunk):
        offset = self.options.offset
        header = (f"... ...   @@ -{hunk.old_start + offset},{hunk.removed} "
                  f"+{hunk.new_start + offset},{hunk.inserted} @@")
        self._writeln(self.colors.paint(header, self.colors.dim))
        pairing = ReplacePairing.from_hunk(hunk)
        for line in hunk.lines:
            partner = pairing.partner(line)
            if partner is not None:
                highlighted = self.sub_line.highlight(partner, line)
                if highlighted is not None:
                    self._writeln(self.format_line(line, styled=highlighted))
                    continue
            self._writeln(self.format_line(line))

    def _position(self, pos: Optional[int]) -> str:
        return f"{pos + 1 + self.options.offset:03}"

    def format_line(self, line: LineRecord, styled: Optional[str] = None) -> str:
        c = self.colors
        if line.kind.is_insertion:
            gutter = c.paint(f"    {self._position(line.new_pos)}  ", c.green, c.bg_black)
            gutter += c.paint(line.sign, c.bold, c.green, c.bg_black)
        elif line.kind.is_removal:
            gutter = c.paint(f"{self._position(line.old_pos)}      ", c.red, c.bg_black)
            gutter += c.paint(line.sign, c.bold, c.red, c.bg_black)
        else:
            gutter = f"{self._position(line.old_pos)} {self._position(line.new_pos)}   "
        if styled is not None:
            return gutter + styled
        content = str(line.content)
        if line.kind == LineKind.REPLACE_INSERTED:
            content = c.paint(content, c.green, c.bg_black)
        elif line.kind == LineKind.REPLACE_REMOVED:
            content = c.paint(content, c.red, c.bg_black)
        elif line.kind == LineKind.INSERTED:
            content = c.paint(content, c.black, c.bg_green)
        elif line.kind == LineKind.REMOVED:
            content = c.paint(content, c.black, c.bg_red)
        return gutter + content


RendererFactory.register("display", DisplayRenderer)
