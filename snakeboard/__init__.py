"""Snake games on plain-text boards: a board model, food and steering helpers, and two commands."""

__version__ = "0.1.0"
__all__ = ["state", "snake_utils", "cli", "interactive"]