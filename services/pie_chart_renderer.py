"""Donut chart for the widget: top 3 categories, gradient rim, centered label.

Drawn with matplotlib on a private Agg canvas (no pyplot, no shared figure),
so concurrent renders for different widget instances never share state.
Axes run in pixel units with y pointing down, which makes matplotlib's wedge
angles clockwise on screen and lets -90° mean 12 o'clock.
"""
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Wedge
from PIL import Image

from models.chart import ArcSegment, RenderedChart
from utils.colors import rgba_to_float
from utils.constants import (
    CHART_BORDER_COLOR,
    CHART_BORDER_WIDTH_PX,
    CHART_FALLBACK_COLOR,
    CHART_INNER_COLOR,
    CHART_INNER_RATIO,
    CHART_LABEL,
    CHART_LABEL_COLOR,
    CHART_LABEL_SCALE,
    CHART_PADDING_PX,
    CHART_RIM_WIDTH_PX,
    CHART_START_ANGLE,
    MAX_CATEGORY_ROWS,
)

GRADIENT_STEPS = 256


def compute_segments(categories, colors, start_angle: float = CHART_START_ANGLE) -> list[ArcSegment]:
    """Sweep angles for the first 3 categories, in the order given.

    Returns [] when the amounts do not add up to something positive.
    Accumulated float slack is left as is.
    """
    used = list(categories)[:MAX_CATEGORY_ROWS]
    total = sum(c.amount for c in used)
    if total <= 0:
        return []

    segments = []
    start = start_angle
    for i, category in enumerate(used):
        sweep = (category.amount / total) * 360.0
        color = colors[i % len(colors)] if colors else CHART_FALLBACK_COLOR
        segments.append(ArcSegment(start_angle=start, sweep_angle=sweep, color=color))
        start += sweep
    return segments


def _gradient(color: str) -> np.ndarray:
    """Vertical strip from color (top row) to white (bottom row)."""
    top = np.array(rgba_to_float(color))
    white = np.ones(4)
    t = np.linspace(0.0, 1.0, GRADIENT_STEPS)[:, None]
    return (top * (1 - t) + white * t).reshape(GRADIENT_STEPS, 1, 4)


class PieChartRenderer:
    def __init__(self, inner_ratio: float = CHART_INNER_RATIO, label: str = CHART_LABEL):
        if not 0 < inner_ratio < 1:
            raise ValueError("inner_ratio must be between 0 and 1.")
        self._inner_ratio = inner_ratio
        self._label = label

    @staticmethod
    def blank(size: int) -> RenderedChart:
        return RenderedChart(image=Image.new("RGBA", (size, size), (0, 0, 0, 0)))

    def render(self, categories, colors, size: int) -> RenderedChart:
        if size <= 0:
            raise ValueError(f"Chart size must be positive, got {size}.")

        segments = compute_segments(categories, colors)
        if not segments:
            return self.blank(size)

        fig = Figure(figsize=(1, 1), dpi=size)
        fig.patch.set_alpha(0.0)
        canvas = FigureCanvasAgg(fig)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_axis_off()

        center = size / 2
        radius = size / 2 - CHART_PADDING_PX
        inner_radius = radius * self._inner_ratio
        pt = 72.0 / size    # points per pixel

        for seg in segments:
            if seg.sweep_angle <= 0:
                continue
            ax.add_patch(Wedge(
                (center, center), radius, seg.start_angle, seg.end_angle,
                facecolor=seg.color, edgecolor="none", linewidth=0,
            ))
            self._draw_rim(ax, seg, center, radius)

        ax.add_patch(Circle(
            (center, center), inner_radius,
            facecolor=CHART_INNER_COLOR, edgecolor="none", linewidth=0,
        ))
        ax.add_patch(Circle(
            (center, center), radius, fill=False,
            edgecolor=rgba_to_float(CHART_BORDER_COLOR),
            linewidth=CHART_BORDER_WIDTH_PX * pt,
        ))
        ax.text(
            center, center, self._label,
            ha="center", va="center", multialignment="center",
            color=CHART_LABEL_COLOR, fontweight="bold", linespacing=1.1,
            fontsize=inner_radius * CHART_LABEL_SCALE * pt,
        )

        ax.set_xlim(0, size)
        ax.set_ylim(size, 0)
        canvas.draw()
        image = Image.fromarray(np.array(canvas.buffer_rgba()))
        if image.size != (size, size):
            image = image.resize((size, size))

        return RenderedChart(
            image=image,
            segments=tuple(segments),
            palette=tuple(s.color for s in segments),
        )

    def _draw_rim(self, ax, seg: ArcSegment, center: float, radius: float):
        """Stroke the outer arc of one sector with a color → white gradient."""
        outer = radius + CHART_RIM_WIDTH_PX / 2
        rim = Wedge(
            (center, center), outer, seg.start_angle, seg.end_angle,
            width=CHART_RIM_WIDTH_PX, facecolor="none", edgecolor="none",
        )
        ax.add_patch(rim)
        im = ax.imshow(
            _gradient(seg.color),
            extent=(center - outer, center + outer, center + outer, center - outer),
            origin="upper", interpolation="bilinear", aspect="auto",
        )
        im.set_clip_path(rim)
