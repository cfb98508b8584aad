"""place-union: a City-or-Country tagged union stored as nullable foreign keys."""

__version__ = "0.1.0"
