import setuptools

setuptools.setup(
  name="chaincoding",
  version="1.0.0",
  description="Moore neighbor chain code compression of single object labeled images.",
  python_requires=">=3.8",
  packages=[ "chaincoding", "chaincoding_cli" ],
  install_requires=[
    "numpy",
    "click",
    "tqdm",
  ],
  extras_require={
    "test": [
      "pytest",
    ],
  },
  entry_points={
    "console_scripts": [
      "chaincoding=chaincoding_cli:main"
    ],
  },
)
