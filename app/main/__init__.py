# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Main package for the Django project.

This package contains the settings, URL configuration and server entry points.
The Celery app is imported here so shared tasks bind to it when Django starts.
"""

from main.celery import app as celery_app

__all__ = ('celery_app',)
