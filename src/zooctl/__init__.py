"""zooctl — creature and zone registry for the fantastic zoo."""

__version__ = "0.1.0"
