"""Classic data structures and algorithms, with timing workloads and a command interpreter."""

__version__ = "0.1.0"