"""CatchUp News API: favorite news sources per News API key."""

__version__ = "0.1.0"
