"""Private Markets API - funds, investors, investments and fund analytics."""

__version__ = "1.0.0"
