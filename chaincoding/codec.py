from typing import Union

import numpy as np

from .chaincode import ChainCode
from .decoder import reconstruct
from .encoder import trace
from .headers import ImageHeader, FormatError
from .image import Image
from .lib import Point, replay

def header(text:str) -> ImageHeader:
  """Decode the image header from chain code text."""
  return ImageHeader.fromtext(text, error=FormatError)

def compress(
  image:Union[Image, np.ndarray], progress:bool = False
) -> str:
  """Trace the first labeled region and return its chain code text."""
  if not isinstance(image, Image):
    image = Image.fromarray(image)
  return trace(image, progress=progress).totext()

def decompress(text:str) -> Image:
  """Reconstruct the boundary image from chain code text."""
  return reconstruct(ChainCode.fromtext(text))

def start_point(text:str) -> Point:
  return ChainCode.fromtext(text).start

def labels(text:str) -> np.ndarray:
  """The traced label as it appears in the original image."""
  return np.array([ ChainCode.fromtext(text).label ])

def contains(text:str, label:int) -> bool:
  return ChainCode.fromtext(text).label == label

def num_moves(text:str) -> int:
  return len(ChainCode.fromtext(text))

def point_cloud(text:str) -> np.ndarray:
  """
  Boundary pixels in the order they are visited as
  an N x 2 array of 0-based (row, col) coordinates.
  The start point comes first and is not repeated
  at the end.
  """
  code = ChainCode.fromtext(text)
  pts = code.points()
  if len(pts) > 1 and pts[-1] == code.start:
    pts = pts[:-1]
  return np.array(pts, dtype=np.int64).reshape((-1, 2)) - 1

def check(text:str) -> dict:
  """
  Report which parts of a chain code stream are damaged.
  Never raises for malformed input.
  """
  report = {
    "header": False,
    "directions": False,
    "in_bounds": False,
    "closed": False,
  }

  try:
    head = header(text)
    report["header"] = True
  except FormatError:
    return report

  try:
    code = ChainCode.fromtext(text)
    report["directions"] = True
  except FormatError:
    return report

  report["in_bounds"] = (
    head.contains(*code.start)
    and all(( head.contains(*pt) for pt in replay(code.start, code.directions) ))
  )
  report["closed"] = code.closed
  return report
