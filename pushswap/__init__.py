"""Two-stack integer sorting with a fixed instruction set, plus an instruction checker."""

__version__ = "1.0.0"