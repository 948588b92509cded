from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class ArcSegment:
    start_angle: float      # degrees, clockwise from 3 o'clock
    sweep_angle: float
    color: str              # '#RRGGBB'

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle


@dataclass(frozen=True)
class RenderedChart:
    image: Image.Image
    segments: tuple[ArcSegment, ...] = ()
    palette: tuple[str, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.segments

    @property
    def total_sweep(self) -> float:
        return sum(s.sweep_angle for s in self.segments)
