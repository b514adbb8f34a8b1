from os import path
from setuptools import setup, find_packages
from codecs import open

with open(
    path.join(path.abspath(path.dirname(__file__)), "README.md"), encoding="utf-8"
) as f:
    long_description = f.read()

setup(
    name="rgeom",
    version="0.1.0",
    license="MIT",
    description="Exact geometry kernel for rectilinear polygons, intervals and merge objects",
    long_description=long_description,
    long_description_content_type="text/markdown",
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
        "Operating System :: OS Independent",
    ],
    keywords="rectilinear polygon interval manhattan vlsi",
    packages=find_packages(include=["rgeom"]),
    python_requires="~= 3.7",
    install_requires=[
        "sortedcontainers ~= 2.2", "portion ~= 2.2"
    ],
    extras_require={
        "test": ["pytest >= 7.0",
                 "coverage >= 6.0",
                 "numpy >= 1.21.6"],
    },
)
