"""Render Presentation resources into Markdown slide decks, build the resources that serve them, and reconcile them through a client."""

__version__ = "0.0.1"