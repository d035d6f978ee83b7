"""Sea Battle: a two-grid naval game against a computer opponent, with a Tk window."""

__version__ = "0.1.0"