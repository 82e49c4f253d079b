#!/usr/bin/env python
"""Django's command-line utility for the shiftStats host."""

from __future__ import annotations

import os
import sys


def main() -> None:
    """Run administrative tasks (runserver, check)."""

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shiftStats.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not installed or is not available on your PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
