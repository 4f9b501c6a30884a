"""Setup script for the geodistance package."""

from setuptools import setup, find_packages

requires = ["click>=6.2"]

extras_require = {"test": ["pytest"]}

__version__ = None
exec(open("geodistance/version.py").read())

setup(
    name="geodistance",
    version=__version__,
    description="Great-circle distance of two points on a sphere",
    packages=find_packages(exclude=["test"]),
    include_package_data=True,
    install_requires=requires,
    extras_require=extras_require,
    entry_points={"console_scripts": ["geodistance = geodistance.cli:geodistance"]},
)
