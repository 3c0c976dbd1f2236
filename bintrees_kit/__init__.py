"""Binary trees of integers: nodes and queries, text drawing, and a demo command."""

__version__ = "0.1.0"