from typing import Iterable, List

import numpy as np

from .headers import (
  ImageHeader, FormatError,
  InvalidDirectionCode, TruncatedChainCode,
  parse_int,
)
from .lib import Point, NUM_DIRECTIONS, replay

def as_directions(values:Iterable) -> np.ndarray:
  """Validate and convert chain code steps to a uint8 array."""
  directions = []
  for i, value in enumerate(values):
    direction = parse_int(value, InvalidDirectionCode, f"direction at step {i}")
    if not (0 <= direction < NUM_DIRECTIONS):
      raise InvalidDirectionCode(
        f"Direction at step {i} must be in 0-{NUM_DIRECTIONS - 1}. Got: {direction}"
      )
    directions.append(direction)
  return np.array(directions, dtype=np.uint8)

class ChainCode:
  """
  The boundary of one labeled region: the
  start point (1-based row, col), the label,
  and the direction of each step taken around
  the boundary until it closes.

  Text format:

    rows cols minVal maxVal
    startRow startCol label d0 d1 ... dn
  """
  FIXED_FIELDS = ImageHeader.NUM_FIELDS + 3

  def __init__(
    self,
    header:ImageHeader,
    start:Point,
    label:int,
    directions:Iterable[int] = (),
  ):
    self.header = header
    self.start = Point(int(start[0]), int(start[1]))
    self.label = int(label)
    self.directions = as_directions(directions)

  @classmethod
  def fromtext(kls, text:str):
    tokens = text.split()
    if len(tokens) < ChainCode.FIXED_FIELDS:
      raise TruncatedChainCode(
        f"Chain code must begin with {ChainCode.FIXED_FIELDS} integers "
        f"(rows cols minVal maxVal startRow startCol label). Got: {tokens}"
      )

    N = ImageHeader.NUM_FIELDS
    header = ImageHeader.fromtokens(tokens[:N], error=FormatError)
    start_row = parse_int(tokens[N], FormatError, "start row")
    start_col = parse_int(tokens[N+1], FormatError, "start column")
    label = parse_int(tokens[N+2], FormatError, "label")

    if label <= 0:
      raise FormatError(f"The traced label must be positive. Got: {label}")

    return ChainCode(
      header,
      Point(start_row, start_col),
      label,
      tokens[ChainCode.FIXED_FIELDS:],
    )

  def totext(self) -> str:
    fields = [ self.start.row, self.start.col, self.label ]
    fields.extend(( int(d) for d in self.directions ))
    return (
      self.header.totext() + "\n"
      + " ".join(( str(f) for f in fields )) + "\n"
    )

  def points(self) -> List[Point]:
    """Every boundary point visited, start first."""
    return [ self.start ] + list(replay(self.start, self.directions))

  @property
  def closed(self) -> bool:
    """Does following the directions end on the start point?"""
    end = self.start
    for end in replay(self.start, self.directions):
      pass
    return end == self.start

  def __len__(self):
    return len(self.directions)

  def __eq__(self, other) -> bool:
    if not isinstance(other, ChainCode):
      return NotImplemented
    return (
      self.header == other.header
      and self.start == other.start
      and self.label == other.label
      and np.array_equal(self.directions, other.directions)
    )

  def __repr__(self):
    return (
      f"ChainCode(start={tuple(self.start)}, label={self.label}, "
      f"moves={len(self)}, header={self.header})"
    )
