"""tvcode - convert video libraries to an Apple TV compatible H.264/AAC MP4."""

__version__ = "0.1.0"
