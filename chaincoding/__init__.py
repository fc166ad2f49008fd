"""A 2D labeled image boundary codec.

chaincoding stores a single labeled object as
an 8-connected Freeman chain code: the position
of the first labeled pixel in row-major order,
its label, and the direction of every step taken
around the object's boundary until the walk
returns to where it began.

The boundary is found by Moore neighbor tracing.
At each boundary pixel the 8 neighbors are
scanned clockwise, and the scan begins at a
direction determined by the step just taken so
that the walk never doubles back onto the pixel
it came from.

Directions are numbered clockwise beginning
with the right hand neighbor:

  3 2 1
  4 . 0
  5 6 7

Decoding replays the steps onto a blank image
and recovers the boundary (not the interior),
marking it with the original label plus 2.

Text formats:

  grid:        rows cols minVal maxVal v0 v1 ... (row-major)
  chain code:  rows cols minVal maxVal
               startRow startCol label d0 d1 ... dn
"""
from .chaincode import ChainCode
from .codec import (
  compress, decompress,
  header, labels, contains,
  start_point, num_moves,
  point_cloud, check,
)
from .decoder import reconstruct
from .encoder import (
  trace, trace_step, find_start,
  find_next_direction, TraceState,
  NoObjectFound, BrokenBoundary,
)
from .headers import (
  ImageHeader, FormatError, MalformedInput,
  InvalidDirectionCode, TruncatedChainCode,
)
from .image import Image
from .lib import (
  Point, neighbors_of,
  NEIGHBOR_OFFSETS, DIR_TABLE,
  BOUNDARY_LABEL_OFFSET,
)
from .util import (
  load, save, load_header,
  load_chain_code, save_chain_code,
  output_paths, IOFailure,
)
