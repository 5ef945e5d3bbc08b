"""TikZ export of a unit-circle frame."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, List, Optional, Tuple

from .surfaces import font_size
from .transform import Viewport

if TYPE_CHECKING:
    from .controller import InteractionController

Point = Tuple[float, float]

PT_PER_PX = 0.4
DEFAULT_SCALE = 3.0

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")
_RGBA_RE = re.compile(r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([0-9.]+)\s*)?\)$")
_SQRT_RE = re.compile(r"√(\d+)")
_MATH_DELIM_RE = re.compile(r"(?<!\\)\$")

standalone_tpl = r"""\documentclass[border=4pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{amsmath}
\usepackage{tikz}
\usetikzlibrary{calc}
\begin{document}
\begin{minipage}[t]{12cm}
%s
\centering
%s
\end{minipage}
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _escape_text_segment(text: str) -> str:
    repl = {
        "\\": r"\textbackslash{}",
        "&": r"\&",
        "%": r"\%",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }
    return "".join(repl.get(c, c) for c in text)


def latex_escape_keep_math(s: str) -> str:
    """Escape LaTeX specials outside ``$...$`` spans, leaving math untouched."""

    parts: List[str] = []
    pos = 0
    in_math = False
    for m in _MATH_DELIM_RE.finditer(s):
        chunk = s[pos:m.start()]
        parts.append(chunk if in_math else _escape_text_segment(chunk))
        parts.append("$")
        in_math = not in_math
        pos = m.end()
    tail = s[pos:]
    parts.append(tail if in_math else _escape_text_segment(tail))
    return "".join(parts)


def latex_label(text: str) -> str:
    """Render an engine label such as ``"(√2/2, -1/2)"`` as LaTeX."""

    converted = _SQRT_RE.sub(lambda m: "$\\sqrt{" + m.group(1) + "}$", text)
    converted = converted.replace("π", "$\\pi$").replace("°", "$^\\circ$")
    return latex_escape_keep_math(converted).replace("$$", "")


def tikz_color(color: str) -> Tuple[str, Optional[float]]:
    """TikZ color expression and opacity (``None`` when opaque)."""

    color = color.strip()
    m = _HEX_RE.match(color)
    if m:
        value = m.group(1)
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
        return f"{{rgb,255:red,{r};green,{g};blue,{b}}}", None
    m = _RGBA_RE.match(color)
    if m:
        r, g, b = (int(m.group(i)) for i in (1, 2, 3))
        alpha = float(m.group(4)) if m.group(4) is not None else 1.0
        return f"{{rgb,255:red,{r};green,{g};blue,{b}}}", (None if alpha >= 1.0 else alpha)
    return color, None


class TikzSurface:
    """Rendering surface that emits TikZ commands instead of pixels.

    Canvas coordinates are mapped into unit-circle coordinates, so the circle
    itself is drawn with radius 1 and the picture ``scale`` sets its size in
    centimetres.
    """

    char_width_factor = 0.6

    def __init__(self, viewport: Viewport, *, scale: float = DEFAULT_SCALE) -> None:
        self.viewport = viewport
        self.scale = scale
        self.lines: List[str] = []

    def _pt(self, point: Point) -> str:
        x, y = self._to_unit(point)
        return f"({_format_float(x)}, {_format_float(y)})"

    def _to_unit(self, point: Point) -> Point:
        vp = self.viewport
        r = vp.radius if vp.radius > 0 else 1.0
        return ((point[0] - vp.center_x) / r, (vp.center_y - point[1]) / r)

    def _len(self, pixels: float) -> float:
        r = self.viewport.radius if self.viewport.radius > 0 else 1.0
        return pixels / r

    @staticmethod
    def _style(color: str, *, width: Optional[float] = None, alpha: float = 1.0, fill: bool = False) -> str:
        expr, opacity = tikz_color(color)
        tokens = [f"fill={expr}" if fill else f"draw={expr}"]
        if width is not None:
            tokens.append(f"line width={_format_float(width * PT_PER_PX)}pt")
        if opacity is not None:
            alpha *= opacity
        if alpha < 1.0:
            tokens.append(f"opacity={_format_float(alpha)}")
        return ", ".join(tokens)

    def clear(self, width: float, height: float) -> None:
        self.lines = []
        self.lines.append(f"  \\clip {self._pt((0.0, height))} rectangle {self._pt((width, 0.0))};")

    def line(self, start, end, *, color, width=1.0, dash=None, alpha=1.0) -> None:
        style = self._style(color, width=width, alpha=alpha)
        if dash:
            on, off = dash[0], dash[1] if len(dash) > 1 else dash[0]
            style += f", dash pattern=on {_format_float(on * PT_PER_PX)}pt off {_format_float(off * PT_PER_PX)}pt"
        self.lines.append(f"  \\draw[{style}] {self._pt(start)} -- {self._pt(end)};")

    def arc(self, center, radius, start, end, *, anticlockwise=False, color, width=1.0) -> None:
        # canvas angles turn clockwise on screen; TikZ angles are mathematical
        start_deg = math.degrees(-start)
        end_deg = math.degrees(-end)
        if anticlockwise:
            while end_deg < start_deg:
                end_deg += 360.0
        else:
            while end_deg > start_deg:
                end_deg -= 360.0
        if math.isclose(start_deg, end_deg, abs_tol=1e-9):
            return
        r = self._len(radius)
        cx, cy = self._to_unit(center)
        sx = cx + r * math.cos(math.radians(start_deg))
        sy = cy + r * math.sin(math.radians(start_deg))
        self.lines.append(
            "  \\draw[{style}] ({x}, {y}) arc[start angle={a}, end angle={b}, radius={r}];".format(
                style=self._style(color, width=width),
                x=_format_float(sx),
                y=_format_float(sy),
                a=_format_float(start_deg),
                b=_format_float(end_deg),
                r=_format_float(r),
            )
        )

    def circle(self, center, radius, *, color, fill=False, width=1.0) -> None:
        style = self._style(color, fill=fill, width=None if fill else width)
        command = "\\fill" if fill else "\\draw"
        self.lines.append(
            f"  {command}[{style}] {self._pt(center)} circle[radius={_format_float(self._len(radius))}];"
        )

    def polygon(self, points, *, color) -> None:
        path = " -- ".join(self._pt(p) for p in points)
        self.lines.append(f"  \\fill[{self._style(color, fill=True)}] {path} -- cycle;")

    def rect(self, x, y, width, height, *, color) -> None:
        self.lines.append(
            f"  \\fill[{self._style(color, fill=True)}] {self._pt((x, y + height))} rectangle {self._pt((x + width, y))};"
        )

    def text(self, text, position, *, color, font) -> None:
        expr, opacity = tikz_color(color)
        tokens = [f"text={expr}", "font=\\footnotesize\\bfseries" if "bold" in font.split() else "font=\\footnotesize"]
        if opacity is not None:
            tokens.append(f"text opacity={_format_float(opacity)}")
        self.lines.append(f"  \\node[{', '.join(tokens)}] at {self._pt(position)} {{{latex_label(text)}}};")

    def measure_text(self, text: str, font: str) -> float:
        return len(text) * font_size(font) * self.char_width_factor

    def picture(self) -> str:
        body = "\n".join(self.lines)
        return f"\\begin{{tikzpicture}}[scale={_format_float(self.scale)}]\n{body}\n\\end{{tikzpicture}}"


def generate_tikz_code(controller: "InteractionController", *, scale: float = DEFAULT_SCALE) -> str:
    """TikZ picture of the controller's current frame."""

    surface = TikzSurface(controller.viewport, scale=scale)
    controller.render(surface)
    return surface.picture()


def generate_tikz_document(
    controller: "InteractionController",
    *,
    title: Optional[str] = None,
    scale: float = DEFAULT_SCALE,
) -> str:
    """Render a standalone LaTeX document for the controller's current frame."""

    header = ""
    if title:
        header = "\\noindent\\textbf{" + latex_label(title.strip()) + "}\\par\\vspace{4pt}\n"
    return standalone_tpl % (header, generate_tikz_code(controller, scale=scale))
