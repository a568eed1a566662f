"""Manor Mystery: explore the manor, gather the clues, face the murderer."""

__version__ = "1.0.0"
