from typing import Iterable, Optional

import logging

import numpy as np

from .chaincode import ChainCode, as_directions
from .headers import ImageHeader, FormatError
from .image import Image
from .lib import BOUNDARY_LABEL_OFFSET, compute_dtype, replay

logger = logging.getLogger(__name__)

def validate_directions(values:Iterable) -> np.ndarray:
  return as_directions(values)

def boundary_label(label:int) -> int:
  return int(label) + BOUNDARY_LABEL_OFFSET

def reconstruct(
  chain_code:ChainCode,
  rows:Optional[int] = None,
  cols:Optional[int] = None,
) -> Image:
  """
  Replay a chain code onto a blank image.

  Only the boundary is recovered: every point on
  the walk is set to label + BOUNDARY_LABEL_OFFSET
  and all other pixels are 0.

  rows and cols default to the chain code's header.
  """
  head = chain_code.header
  header = ImageHeader(
    head.rows if rows is None else rows,
    head.cols if cols is None else cols,
    head.min_val, head.max_val,
  )
  directions = validate_directions(chain_code.directions)
  value = boundary_label(chain_code.label)

  dtype = compute_dtype(max(header.max_val, value), min(header.min_val, 0))
  image = Image.zeros(header, dtype=dtype)

  start = chain_code.start
  if not header.contains(*start):
    raise FormatError(
      f"Start point {tuple(start)} lies outside of the {header.rows}x{header.cols} image."
    )
  image.set_plain(start.row - 1, start.col - 1, value)

  for i, point in enumerate(replay(start, directions)):
    if not header.contains(*point):
      raise FormatError(
        f"Step {i} (direction {directions[i]}) leaves the "
        f"{header.rows}x{header.cols} image at {tuple(point)}."
      )
    image.set_plain(point.row - 1, point.col - 1, value)

  logger.debug(
    "reconstructed %d boundary steps as label %d", len(directions), value
  )
  return image
