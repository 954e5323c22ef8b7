"""Journal Formatter — reformat manuscripts to a target journal's house style."""

__version__ = "0.1.0"
