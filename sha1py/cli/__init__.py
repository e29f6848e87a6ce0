"""Command-line interface for sha1py."""
