from setuptools import find_packages, setup

setup(
  name="suite25519",
  version="1.0.0",
  author="suite25519 developers",
  description="Ed25519 signatures and ECIES encryption with compact msgpack envelopes",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["suite25519", "suite25519.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "colorama>=0.4",
    "cryptography>=35",
    "pynacl>=1.4",
    "msgpack>=1.0",
    "pyperclip>=1.8",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(console_scripts=["suite25519 = suite25519.cli.__main__:main"]),
)
