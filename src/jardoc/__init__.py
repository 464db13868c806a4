"""jardoc - living style guide documentation extractor for component sources."""

try:
    from importlib.metadata import version

    __version__ = version("jardoc")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
