"""Lesson persistence."""
