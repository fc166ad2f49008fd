from typing import Tuple

import logging
import os

from .chaincode import ChainCode
from .headers import ImageHeader
from .image import Image

logger = logging.getLogger(__name__)

CHAIN_CODE_SUFFIX = "_chainCode.txt"
DECOMPRESSED_SUFFIX = "_chainCodeDecompressed.txt"

class IOFailure(OSError):
  """A source or sink could not be opened, read or written."""
  pass

def _load(filelike) -> str:
  if hasattr(filelike, 'read'):
    text = filelike.read()
  else:
    try:
      with open(filelike, 'rt') as f:
        text = f.read()
    except OSError as err:
      raise IOFailure(f"Unable to read {filelike}: {err.strerror or err}") from err

  if isinstance(text, bytes):
    text = text.decode('utf8')
  return text

def _save(text:str, filelike):
  if hasattr(filelike, 'write'):
    filelike.write(text)
    return

  try:
    with open(filelike, 'wt') as f:
      f.write(text)
  except OSError as err:
    raise IOFailure(f"Unable to write {filelike}: {err.strerror or err}") from err
  logger.info("wrote %s", filelike)

def tload(filelike) -> str:
  """Load the raw text."""
  return _load(filelike)

def load(filelike) -> Image:
  """Load a grid ("rows cols minVal maxVal" + values) from a file-like object or path."""
  return Image.fromtext(_load(filelike))

def save(image:Image, filelike):
  """Save an image as a header line followed by one line per row."""
  _save(image.totext(), filelike)

def load_header(filelike) -> ImageHeader:
  return ImageHeader.fromtext(_load(filelike))

def load_chain_code(filelike) -> ChainCode:
  return ChainCode.fromtext(_load(filelike))

def save_chain_code(chain_code:ChainCode, filelike):
  _save(chain_code.totext(), filelike)

def output_paths(src:str) -> Tuple[str,str]:
  """
  Derive the chain code and decompressed file
  names from the source grid's path.

  e.g. data/image.txt -> (
    data/image_chainCode.txt,
    data/image_chainCodeDecompressed.txt
  )
  """
  root, _ = os.path.splitext(src)
  return (
    root + CHAIN_CODE_SUFFIX,
    root + DECOMPRESSED_SUFFIX,
  )
