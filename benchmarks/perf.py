import chaincoding

import numpy as np

import time

def disk(radius, pad=1):
  n = 2 * (radius + pad) + 1
  y, x = np.mgrid[:n,:n] - (radius + pad)
  return (x*x + y*y <= radius * radius).astype(np.uint32)

def run_sample(labels, N):
  for i in range(N):
    s = time.time()
    text = chaincoding.compress(labels)
    compress_time = time.time() - s

    s = time.time()
    chaincoding.decompress(text)
    decompress_time = time.time() - s

    moves = chaincoding.num_moves(text)
    mvxs = lambda t: labels.size / t / 1e6
    steps = lambda t: moves / t / 1e3

    print(f"""
      compress     :  {mvxs(compress_time):.2f} MVx/sec, {steps(compress_time):.1f} kSteps/sec ({len(text)} bytes, {len(text)/labels.nbytes*100:.1f}%)
      decompress   :  {mvxs(decompress_time):.2f} MVx/sec, {steps(decompress_time):.1f} kSteps/sec
    """, flush=True)

N = 3

for radius in (16, 64, 256):
  print(f"DISK r={radius}")
  run_sample(disk(radius), N)

print("SOLID ONES 512x512")
run_sample(np.ones((512,512), dtype=np.uint32), N)

print("SINGLE ROW 1x4096")
run_sample(np.ones((1,4096), dtype=np.uint32), N)
