"""Operating-system algorithms: CPU, disk and page scheduling, memory allocation,
the banker's algorithm, a bounded buffer, and file, process and chat exercises."""

__version__ = "0.1.0"