"""A small notebook-style text editor: file handling and a Tk window."""

__version__ = "0.1.0"
__all__ = ["document", "gui"]