"""Command-line drivers for the bundled games."""
