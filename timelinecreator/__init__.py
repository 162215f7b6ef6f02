"""Timeline Creator - build editing timelines with custom track layouts."""

__version__ = "1.1.0"
