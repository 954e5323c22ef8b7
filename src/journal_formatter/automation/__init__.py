"""Manuscript formatting pipeline.

Offline, regex-based rewriting of raw manuscript text into a target
journal's layout.
"""

from journal_formatter.automation.pipeline import ManuscriptFormatter

__all__ = ["ManuscriptFormatter"]
