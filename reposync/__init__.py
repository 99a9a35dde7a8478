"""reposync: clone, check and fast-forward a directory of git checkouts."""

__version__ = "1.0.0"
