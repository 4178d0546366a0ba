"""storyreel: compose short videos from an ordered timeline of scenes."""

__version__ = "0.1.0"
