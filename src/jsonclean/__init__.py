"""JSONCLEAN

Control-character cleanup for JSON payload fragments.
Collapses carriage returns, line feeds, and tabs into single spaces so that
text pulled from records or templates can be embedded in a JSON request body
without corrupting it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
