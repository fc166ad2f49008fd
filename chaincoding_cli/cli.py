import logging
import sys

import click

import chaincoding

def fail(msg):
  print(f"chaincoding: {msg}")
  sys.exit(1)

@click.command()
@click.option('-i', "--info", default=False, is_flag=True, help="Print the header of a chain code file.", show_default=True)
@click.option('-t', "--test", default=False, is_flag=True, help="Check a chain code file for damage.", show_default=True)
@click.option('-p', "--progress", default=False, is_flag=True, help="Show tracing progress.", show_default=True)
@click.option('-v', "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
@click.argument("source")
def main(info, test, progress, verbose, source):
	"""
	Trace the boundary of the labeled object in a grid
	file and write SOURCE_chainCode.txt, then rebuild
	the boundary from that file and write it to
	SOURCE_chainCodeDecompressed.txt.

	The grid file holds "rows cols minVal maxVal"
	followed by rows*cols integers in row-major order.
	"""
	level = logging.WARNING
	if verbose == 1:
		level = logging.INFO
	elif verbose > 1:
		level = logging.DEBUG
	logging.basicConfig(level=level, format="%(name)s: %(message)s")

	if info:
		print_header(source)
	elif test:
		check_chain_code(source)
	else:
		encode_decode_file(source, progress)

def print_header(src):
	try:
		head = chaincoding.load_header(src)
		code = chaincoding.load_chain_code(src)
	except chaincoding.IOFailure as err:
		fail(err)
	except chaincoding.FormatError as err:
		fail(err)

	print(f"Filename: {src}")
	for key,val in head.__dict__.items():
		print(f"{key}: {val}")
	print(f"start: {code.start.row} {code.start.col}")
	print(f"label: {code.label}")
	print(f"moves: {len(code)}")
	print()

def check_chain_code(src):
	try:
		text = chaincoding.util.tload(src)
	except chaincoding.IOFailure as err:
		fail(err)

	print(f"testing {src}...")

	report = chaincoding.check(text)

	def pretty(human, key):
		if report[key]:
			print(f"{human} ok.")
		else:
			print(f"{human} damaged.")

	pretty("header", "header")
	pretty("directions", "directions")
	pretty("bounds", "in_bounds")
	pretty("closure", "closed")

	print("done.")

	if not all(report.values()):
		sys.exit(1)

def encode_decode_file(src, progress):
	chain_code_path, decompressed_path = chaincoding.output_paths(src)

	try:
		image = chaincoding.load(src)
		chain_code = chaincoding.trace(image, progress=progress)
		chaincoding.save_chain_code(chain_code, chain_code_path)
		del chain_code

		chain_code = chaincoding.load_chain_code(chain_code_path)
		reconstructed = chaincoding.reconstruct(chain_code)
		chaincoding.save(reconstructed, decompressed_path)
	except chaincoding.IOFailure as err:
		fail(err)
	except (chaincoding.FormatError, chaincoding.NoObjectFound, chaincoding.BrokenBoundary) as err:
		fail(err)
