import os

import numpy as np

import chaincoding

def disk(radius, pad=2):
  n = 2 * (radius + pad) + 1
  y, x = np.mgrid[:n,:n] - (radius + pad)
  return (x*x + y*y <= radius * radius).astype(np.uint8)

shapes = {
  "square": np.pad(np.ones((6,6), dtype=np.uint8), 2),
  "bar": np.array([[0,0,3,3,3,3,0]], dtype=np.uint8),
  "dot": np.array([[0,5,0]], dtype=np.uint8),
  "disk": disk(8) * 2,
  "diamond": np.array([
    [0,0,1,0,0],
    [0,1,1,1,0],
    [1,1,1,1,1],
    [0,1,1,1,0],
    [0,0,1,0,0],
  ], dtype=np.uint8),
}

os.makedirs("examples", exist_ok=True)

for name, labels in shapes.items():
  image = chaincoding.Image.fromarray(labels)
  chaincoding.save(image, f"examples/{name}.txt")
