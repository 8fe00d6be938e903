"""Series TSV filter and task-submission TSV generator."""

__version__ = "0.1.0"
