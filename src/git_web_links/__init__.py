"""Git Web Links: links between local git files and hosting provider URLs."""

__version__ = "0.1.0"
