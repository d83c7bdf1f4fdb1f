"""
Per-vertex displacement for animation regions

Applies the renderer contract

    displaced = prev_amplitude * original + curr_amplitude * waveform(time, original)

where the waveform is a sine for WAVE and a uniform random offset for
JITTER, each shifted by original * prev_frequency on its axis. The z
component of the waveform is always zero.
"""

import math
import random
from typing import Callable, Iterable, List, Optional, Tuple

from ..models.timeline import AnimationKind, AnimationRegion

Vertex = Tuple[float, float, float]


def wave_displace(region: AnimationRegion, time: float, vertex: Vertex) -> Vertex:
    p = region.params
    x, y, z = vertex
    offset_x = math.sin(time * p.curr_frequency_x + x * p.prev_frequency_x)
    offset_y = math.sin(time * p.curr_frequency_y + y * p.prev_frequency_y)
    return (
        p.prev_amplitude * x + p.curr_amplitude * offset_x,
        p.prev_amplitude * y + p.curr_amplitude * offset_y,
        p.prev_amplitude * z,
    )


def jitter_displace(
    region: AnimationRegion, vertex: Vertex, rand: Callable[[], float] = random.random
) -> Vertex:
    p = region.params
    x, y, z = vertex
    # rand() * 2f - f is uniform in [-f, +f]
    offset_x = rand() * 2 * p.curr_frequency_x - p.curr_frequency_x + x * p.prev_frequency_x
    offset_y = rand() * 2 * p.curr_frequency_y - p.curr_frequency_y + y * p.prev_frequency_y
    return (
        p.prev_amplitude * x + p.curr_amplitude * offset_x,
        p.prev_amplitude * y + p.curr_amplitude * offset_y,
        p.prev_amplitude * z,
    )


def region_displace(
    region: AnimationRegion,
    time: float,
    vertex: Vertex,
    rand: Optional[Callable[[], float]] = None,
) -> Vertex:
    """Displace one vertex by one region, dispatching on its kind"""
    if region.kind is AnimationKind.WAVE:
        return wave_displace(region, time, vertex)
    if region.kind is AnimationKind.JITTER:
        return jitter_displace(region, vertex, rand or random.random)
    raise ValueError(f"Unknown animation kind: {region.kind}")


def regions_at(timeline: Iterable[AnimationRegion], index: int) -> List[AnimationRegion]:
    """Regions covering a visible character index, in timeline order"""
    return [region for region in timeline if index in region]


def vertex_displace(
    timeline: Iterable[AnimationRegion],
    index: int,
    time: float,
    vertex: Vertex,
    rand: Optional[Callable[[], float]] = None,
) -> Vertex:
    """
    Apply every region covering a character to one of its vertices

    Regions compose in timeline order, each starting from the previous
    one's output. A character outside every region is returned unchanged.
    """
    for region in regions_at(timeline, index):
        vertex = region_displace(region, time, vertex, rand)
    return vertex
