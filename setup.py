from setuptools import find_packages, setup

setup(
  name="xladder",
  version="0.1.0",
  description="x-only Montgomery curve arithmetic and the Montgomery ladder over any ring or field",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests", "tests.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
  ],
  install_requires=[],
  extras_require={
    "test": [
      "pytest",
      "pytest-sugar",
      "pytest-mock",
      "coverage",
      "mypy",
      "bandit",
      "pynacl>=1.4",
      "cryptography>=40",
    ],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
)
