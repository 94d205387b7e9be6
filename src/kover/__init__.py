"""kover: read, validate and query scenes of buildings and antennas."""

__version__ = "1.0.0"
