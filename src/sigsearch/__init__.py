"""sigsearch - search TypeScript declarations by type signature shape."""

try:
    from importlib.metadata import version

    __version__ = version("sigsearch")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
