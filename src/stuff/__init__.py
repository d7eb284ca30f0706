"""stuff

Stateless helpers for a client-side application: channel-gated debug
logging, positional string formatting, small string/list/path utilities and
URL query-string serialization and merging.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
