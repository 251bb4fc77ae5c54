"""Search genius.com and print plain text song lyrics from its song pages."""

__version__ = "0.1.0"