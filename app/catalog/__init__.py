# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Catalog app for the Django project.

This package contains the book and listing models, their serializers and the
REST endpoints built on the Django REST framework.
"""
