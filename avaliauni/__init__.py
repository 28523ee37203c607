"""Students, institutions and reviews kept in text files, with a console menu over them."""

__version__ = "0.1.0"