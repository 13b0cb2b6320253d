"""In-memory customer and account ledger with a command-driven shell."""

__version__ = "0.1.0"
