"""
Moore neighbor boundary tracing.

Starting from the first labeled pixel in row-major
order, the tracer repeatedly scans the 8 neighbors
of the current point clockwise in chain code order
and steps onto the first one carrying the same label.
The scan at the next point begins at DIR_TABLE[d]
where d is the direction just taken, which keeps the
walk on the outside of the region and stops it from
immediately stepping back onto the pixel it left.

The walk is a do-while: one step is always taken
and the trace ends the first time it lands on the
start point again.
"""
from collections import namedtuple
from typing import Iterator, Tuple

import logging

import numpy as np
from tqdm import tqdm

from .chaincode import ChainCode
from .image import Image
from .lib import (
  Point, DIR_TABLE, INITIAL_SCAN_DIRECTION,
  NUM_DIRECTIONS, neighbors_of,
)

logger = logging.getLogger(__name__)

class NoObjectFound(ValueError):
  """The image contains no positive labels."""
  pass

class BrokenBoundary(ValueError):
  """The boundary walk could not continue or never closed."""
  pass

TraceState = namedtuple('TraceState', ['point', 'scan_start'])

def find_start(image:Image) -> Tuple[Point, int]:
  """First pixel with label > 0 in row-major order and its label."""
  candidates = np.flatnonzero(image.plain > 0)
  if candidates.size == 0:
    raise NoObjectFound(
      f"No positive label found in the {image.rows}x{image.cols} image."
    )

  row, col = divmod(int(candidates[0]), image.cols)
  start = Point(row + 1, col + 1)
  return start, image.label_at(start)

def find_next_direction(
  image:Image, point:Point, scan_start:int, label:int
) -> int:
  """
  Probe the neighbors of point clockwise beginning
  at scan_start and return the direction of the first
  one carrying label. At most 8 probes are made.
  """
  neighbors = neighbors_of(point)
  index = scan_start
  for _ in range(NUM_DIRECTIONS):
    if image.label_at(neighbors[index]) == label:
      return index
    index = (index + 1) % NUM_DIRECTIONS

  raise BrokenBoundary(
    f"No neighbor of {tuple(point)} carries label {label}."
  )

def is_isolated(image:Image, point:Point, label:int) -> bool:
  return all(
    image.label_at(neighbor) != label
    for neighbor in neighbors_of(point)
  )

def trace_step(
  image:Image, state:TraceState, label:int
) -> Tuple[int, TraceState]:
  """Take one step along the boundary."""
  direction = find_next_direction(image, state.point, state.scan_start, label)
  point = neighbors_of(state.point)[direction]
  return direction, TraceState(point, DIR_TABLE[direction])

def walk(
  image:Image, start:Point, label:int, max_steps:int
) -> Iterator[int]:
  """Yield the directions taken from start until the walk returns to it."""
  state = TraceState(start, INITIAL_SCAN_DIRECTION)
  steps = 0
  while True:
    direction, state = trace_step(image, state, label)
    steps += 1
    yield direction

    if state.point == start:
      break
    elif steps >= max_steps:
      raise BrokenBoundary(
        f"Boundary starting at {tuple(start)} did not close within {max_steps} steps."
      )

def trace(image:Image, progress:bool = False) -> ChainCode:
  """
  Compute the chain code of the first labeled
  region found in row-major order.

  A region consisting of a single pixel has no
  neighbor to step to and is returned with an
  empty direction list.
  """
  start, label = find_start(image)
  logger.debug("tracing label %d from %s", label, tuple(start))

  if is_isolated(image, start, label):
    logger.debug("label %d at %s is a single pixel", label, tuple(start))
    return ChainCode(image.header.copy(), start, label, [])

  # each (point, scan_start) state can occur at most once per cycle
  max_steps = NUM_DIRECTIONS * image.rows * image.cols

  directions = []
  with tqdm(disable=(not progress), desc="Tracing", unit="step") as pbar:
    for direction in walk(image, start, label, max_steps):
      directions.append(direction)
      pbar.update(1)

  logger.debug("label %d boundary closed after %d steps", label, len(directions))
  return ChainCode(image.header.copy(), start, label, directions)
