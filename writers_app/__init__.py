"""Writers App: templates, documents and AI writing assistance."""

__version__ = "0.1.0"
