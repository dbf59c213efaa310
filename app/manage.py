#!/usr/bin/env python
# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Django's command-line utility for administrative tasks."""

import os
import sys


def main() -> None:
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'main.settings')

    try:
        from django.core.management import execute_from_command_line  # noqa: PLC0415
    except ImportError as error:
        message = (
            "Couldn't import Django. Are you sure it's installed and available on your PYTHONPATH "
            'environment variable? Did you forget to activate a virtual environment?'
        )
        raise ImportError(message) from error

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
