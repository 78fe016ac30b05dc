"""Presentation: recipe facade and pytest plugin."""
