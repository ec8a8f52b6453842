"""brand-monitor: competitor resolution and AI visibility ranking."""

__version__ = "0.3.0"
