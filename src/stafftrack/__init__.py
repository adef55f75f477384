# Rev 0.1.0
"""stafftrack: employee task assignments with live progress tracking."""

__version__ = "0.1.0"
