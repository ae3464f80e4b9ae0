"""TCP client that sends a directory listing, and a server that stores it as a text file."""

__version__ = "0.1.0"
__all__ = ["client", "protocol", "server"]