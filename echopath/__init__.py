"""EchoPath - Sentence-building game engine for young learners."""

__version__ = "0.1.0"
