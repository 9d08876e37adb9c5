from .version import __version__, get_version

version = __version__

__all__ = ["__version__", "get_version", "version"]
