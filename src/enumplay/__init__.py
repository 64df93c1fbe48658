"""enumplay — playground pages for learning closed value sets."""

__version__ = "0.1.0"
