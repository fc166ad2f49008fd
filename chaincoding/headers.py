from typing import Sequence, Tuple

class FormatError(Exception):
  pass

class MalformedInput(FormatError):
  """The grid source is missing values or has bad dimensions."""
  pass

class InvalidDirectionCode(FormatError):
  """A chain code step is not one of the directions 0-7."""
  pass

class TruncatedChainCode(FormatError):
  """The chain code stream ended before its fixed fields."""
  pass

def parse_int(token, error=FormatError, what:str = "value") -> int:
  try:
    return int(token)
  except (TypeError, ValueError):
    raise error(f"Expected an integer {what}. Got: {token!r}")

class ImageHeader:
  FIELDS = ('rows', 'cols', 'min_val', 'max_val')
  NUM_FIELDS = 4

  def __init__(
    self,
    rows:int, cols:int,
    min_val:int, max_val:int,
  ):
    self.rows = int(rows)
    self.cols = int(cols)
    self.min_val = int(min_val)
    self.max_val = int(max_val)

    if self.rows <= 0 or self.cols <= 0:
      raise MalformedInput(
        f"Image dimensions must be positive. Got: {self.rows}x{self.cols}"
      )

  @classmethod
  def fromtokens(kls, tokens:Sequence[str], error=MalformedInput):
    """Decode the header from the leading whitespace separated tokens."""
    if len(tokens) < ImageHeader.NUM_FIELDS:
      raise error(
        f"Header too short. Expected {ImageHeader.NUM_FIELDS} fields "
        f"({' '.join(ImageHeader.FIELDS)}). Got: {list(tokens)}"
      )

    values = [
      parse_int(tok, error, what)
      for tok, what in zip(tokens, ImageHeader.FIELDS)
    ]
    return ImageHeader(*values)

  @classmethod
  def fromtext(kls, text:str, error=MalformedInput):
    return ImageHeader.fromtokens(text.split()[:ImageHeader.NUM_FIELDS], error=error)

  def totext(self) -> str:
    return f"{self.rows} {self.cols} {self.min_val} {self.max_val}"

  @property
  def shape(self) -> Tuple[int,int]:
    return (self.rows, self.cols)

  @property
  def framed_shape(self) -> Tuple[int,int]:
    return (self.rows + 2, self.cols + 2)

  def num_cells(self) -> int:
    return self.rows * self.cols

  def contains(self, row:int, col:int) -> bool:
    """Is the 1-based (row, col) inside the unframed image?"""
    return 1 <= row <= self.rows and 1 <= col <= self.cols

  def copy(self):
    return ImageHeader(self.rows, self.cols, self.min_val, self.max_val)

  def details(self) -> str:
    return f"""
    rows:     {self.rows}
    cols:     {self.cols}
    min val:  {self.min_val}
    max val:  {self.max_val}
    """

  def __eq__(self, other) -> bool:
    if not isinstance(other, ImageHeader):
      return NotImplemented
    return self.__dict__ == other.__dict__

  def __repr__(self):
    return str(self.__dict__)
