"""Two-pass assembler with macro expansion, producing base64-encoded 12-bit machine words."""

__version__ = "0.1.0"