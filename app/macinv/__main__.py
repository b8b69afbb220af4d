"""Allow ``python -m macinv``."""

from macinv.cli.main import app

app()
