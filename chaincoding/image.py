from typing import Iterable, Optional

import itertools

import numpy as np

from .headers import ImageHeader, MalformedInput
from .lib import Point, compute_dtype

class Image:
  """
  A 2D labeled image stored with a one pixel
  wide border of zeros around it.

  framed: (rows+2, cols+2) array, border always 0
  plain: (rows, cols) view into the interior of framed

  Because plain is a view, framed[i+1,j+1] == plain[i,j]
  always holds. Images produced by load are read-only.
  """
  def __init__(self, header:ImageHeader, framed:np.ndarray):
    if framed.shape != header.framed_shape:
      raise ValueError(
        f"Framed array shape {framed.shape} does not match header {header.framed_shape}."
      )
    self.head = header
    self.framed = framed

  @classmethod
  def load(
    kls,
    rows:int, cols:int,
    min_val:int, max_val:int,
    values:Iterable[int],
  ):
    """Build an image from rows*cols values in row-major order."""
    header = ImageHeader(rows, cols, min_val, max_val)
    N = header.num_cells()

    values = list(itertools.islice(iter(values), N))
    if len(values) < N:
      raise MalformedInput(
        f"Image declares {rows}x{cols} = {N} values but only {len(values)} were supplied."
      )

    try:
      values = np.array([ int(v) for v in values ], dtype=np.int64)
    except (TypeError, ValueError, OverflowError):
      raise MalformedInput("Image values must all be integers.")

    dtype = compute_dtype(int(values.max()), int(values.min()))
    framed = np.zeros(header.framed_shape, dtype=dtype)
    framed[1:-1,1:-1] = values.reshape(header.shape)
    framed.setflags(write=False)
    return Image(header, framed)

  @classmethod
  def fromtext(kls, text:str):
    """Parse "rows cols minVal maxVal v0 v1 ..." text."""
    tokens = text.split()
    header = ImageHeader.fromtokens(tokens[:ImageHeader.NUM_FIELDS])
    return Image.load(
      header.rows, header.cols,
      header.min_val, header.max_val,
      tokens[ImageHeader.NUM_FIELDS:],
    )

  @classmethod
  def fromarray(
    kls,
    arr:np.ndarray,
    min_val:Optional[int] = None,
    max_val:Optional[int] = None,
  ):
    arr = np.asarray(arr)
    if arr.ndim != 2:
      raise ValueError(f"Only 2D images are supported. Got shape: {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
      raise TypeError(f"Only integer images are supported. Got: {arr.dtype}")

    if min_val is None:
      min_val = int(arr.min()) if arr.size else 0
    if max_val is None:
      max_val = int(arr.max()) if arr.size else 0

    rows, cols = arr.shape
    return Image.load(rows, cols, min_val, max_val, arr.ravel(order="C"))

  @classmethod
  def zeros(kls, header:ImageHeader, dtype=None):
    """A blank, writable image."""
    if dtype is None:
      dtype = compute_dtype(max(header.max_val, 0), min(header.min_val, 0))
    return Image(header.copy(), np.zeros(header.framed_shape, dtype=dtype))

  @property
  def plain(self) -> np.ndarray:
    return self.framed[1:-1,1:-1]

  @property
  def header(self) -> ImageHeader:
    return self.head

  @property
  def rows(self) -> int:
    return self.head.rows

  @property
  def cols(self) -> int:
    return self.head.cols

  @property
  def shape(self):
    return self.head.shape

  @property
  def dtype(self):
    return self.framed.dtype

  @property
  def writeable(self) -> bool:
    return self.framed.flags.writeable

  def label_at(self, point:Point) -> int:
    return int(self.framed[point.row, point.col])

  def set_plain(self, row:int, col:int, value:int):
    """Write a 0-based plain pixel. Raises ValueError on read-only images."""
    if not self.writeable:
      raise ValueError("Image is read-only.")
    if not (0 <= row < self.rows and 0 <= col < self.cols):
      raise IndexError(f"({row}, {col}) is outside of a {self.rows}x{self.cols} image.")

    info = np.iinfo(self.dtype)
    if not (info.min <= value <= info.max):
      lo = min(int(self.framed.min()), int(value), 0)
      hi = max(int(self.framed.max()), int(value))
      self.framed = self.framed.astype(compute_dtype(hi, lo))
    self.plain[row, col] = value

  def labels(self) -> np.ndarray:
    """Sorted unique nonzero labels."""
    uniq = np.unique(self.plain)
    return uniq[uniq != 0]

  def copy(self):
    return Image(self.head.copy(), np.copy(self.framed))

  def totext(self) -> str:
    lines = [ self.head.totext() ]
    for row in self.plain:
      lines.append(" ".join(( str(int(v)) for v in row )))
    return "\n".join(lines) + "\n"

  def __eq__(self, other) -> bool:
    if not isinstance(other, Image):
      return NotImplemented
    return (
      self.head == other.head
      and np.array_equal(self.plain, other.plain)
    )

  def __repr__(self):
    return f"Image({self.rows}x{self.cols}, dtype={self.dtype}, labels={self.labels().tolist()})"
