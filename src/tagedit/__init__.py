"""tagedit: view and edit audio file tags from the command line."""

__version__ = "0.1.0"
