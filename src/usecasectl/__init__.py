"""usecasectl — author, validate, and store structured use-case documents."""

__version__ = "0.1.0"
