"""Two-stack integer sorting with a printed trace of the operations used."""

__version__ = "0.1.0"