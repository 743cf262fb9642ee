"""catchup — deterministic twice-a-year catch-up scheduling for two people."""

__version__ = "0.1.0"
