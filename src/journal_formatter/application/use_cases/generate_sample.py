"""Use Case: Provide the sample manuscript.

The sample is a short dental research paper with every known section and
numeric citations, handy for trying each journal format.
"""

from journal_formatter.config.loader import load_sample_manuscript


class GenerateSampleUseCase:
    """Return the sample manuscript text."""

    def execute(self) -> str:
        return load_sample_manuscript()
