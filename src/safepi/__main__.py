"""Allow ``python -m safepi``."""

from safepi.cli import run

run()
