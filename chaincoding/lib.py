from collections import namedtuple
from typing import Iterable, Iterator, List

import numpy as np

Point = namedtuple('Point', ['row', 'col'])

NUM_DIRECTIONS = 8

# chain code direction -> (drow, dcol), clockwise
# starting from the right hand neighbor
NEIGHBOR_OFFSETS = (
  (0, +1),  # 0
  (-1, +1), # 1
  (-1, 0),  # 2
  (-1, -1), # 3
  (0, -1),  # 4
  (+1, -1), # 5
  (+1, 0),  # 6
  (+1, +1), # 7
)

# direction just taken -> direction to begin
# scanning from at the next boundary point
DIR_TABLE = (6, 6, 0, 0, 2, 2, 4, 4)

# tracing begins as though the start point
# was entered with this direction
SEED_DIRECTION = 4
INITIAL_SCAN_DIRECTION = (SEED_DIRECTION + 1) % NUM_DIRECTIONS

# reconstructed boundaries are tagged with
# the traced label plus this offset
BOUNDARY_LABEL_OFFSET = 2

def neighbors_of(point:Point) -> List[Point]:
  """The 8 neighbors of point indexed by chain code direction."""
  row, col = point
  return [
    Point(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS
  ]

def opposite(direction:int) -> int:
  return (direction + NUM_DIRECTIONS // 2) % NUM_DIRECTIONS

def replay(start:Point, directions:Iterable[int]) -> Iterator[Point]:
  """Yields each point reached by following directions from start."""
  point = start
  for direction in directions:
    point = neighbors_of(point)[int(direction)]
    yield point

def compute_byte_width(x) -> int:
  byte_width = 8
  if x <= np.iinfo(np.uint8).max:
    byte_width = 1
  elif x <= np.iinfo(np.uint16).max:
    byte_width = 2
  elif x <= np.iinfo(np.uint32).max:
    byte_width = 4

  return byte_width

def compute_signed_byte_width(lo, hi) -> int:
  for byte_width, dtype in signed_width2dtype.items():
    info = np.iinfo(dtype)
    if info.min <= lo and hi <= info.max:
      return byte_width
  return 8

width2dtype = {
  1: np.uint8,
  2: np.uint16,
  4: np.uint32,
  8: np.uint64,
}

signed_width2dtype = {
  1: np.int8,
  2: np.int16,
  4: np.int32,
  8: np.int64,
}

def compute_dtype(maxval, minval = 0) -> np.dtype:
  """Narrowest integer type able to represent [minval, maxval]."""
  if minval < 0:
    return signed_width2dtype[compute_signed_byte_width(minval, maxval)]
  return width2dtype[compute_byte_width(maxval)]
