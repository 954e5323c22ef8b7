"""Allow ``python -m journal_formatter``."""

from journal_formatter.presentation.cli.app import app

app()
