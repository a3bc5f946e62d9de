import os.path

from setuptools import find_packages, setup

try:
    # Import all script providers so that ENTRYPOINTS gets populated.
    from domolib.scripts import content, group, user  # noqa: F401
    from domolib.scripts.utils import ENTRYPOINTS
except ImportError:
    # Avoid chicken-and-egg dependency requirements during initial installation.
    # This means you need to re-run setup in order to gain script entrypoints.
    ENTRYPOINTS = []


README = os.path.join(os.path.abspath(os.path.dirname(__file__)), "README.rst")


setup(name="domolib",
      version="0.1.0",
      description="Helpers for managing pages, cards, users and groups through the Domo API.",
      long_description=open(README).read(),
      long_description_content_type="text/x-rst",
      platforms=["Any"],
      python_requires=">=3.7",
      install_requires=["docopt", "requests"],
      packages=find_packages(exclude=["tests"]),
      entry_points={"console_scripts": ENTRYPOINTS})
