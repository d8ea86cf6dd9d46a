"""Report deprecated GraphQL fields and arguments used by operation documents."""

__version__ = "0.1.0"
