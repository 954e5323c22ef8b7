"""Presentation layer — user-facing entry points."""
