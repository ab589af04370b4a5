"""CalcVerse: calculator pages generated from one descriptor store."""

__version__ = "0.1.0"
