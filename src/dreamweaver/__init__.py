"""Dreamweaver - personalized children's stories with AI and template fallback."""

__version__ = "0.1.0"
