"""prevdiff — find the right "previous" revision of a file to compare against."""

__version__ = "0.1.0"
