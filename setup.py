""" ecarith build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecarith

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecarith.name,
    version=ecarith.__version__,
    license=ecarith.__license__,
    author=ecarith.__author__,
    author_email=ecarith.__author_email__,
    description="Elliptic curve scalar multiplication in affine coordinates",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"ecarith": ["_data/*.json"]},
    install_requires=["dataclasses_json"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "myst_parser", "sphinx_rtd_theme"],
    },
    keywords="elliptic-curves weierstrass scalar-multiplication double-and-add",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
