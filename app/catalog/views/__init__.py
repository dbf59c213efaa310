# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Catalog views package.

This package contains the API views for the catalog endpoints.
"""

from catalog.views.books import BookViewSet
from catalog.views.listings import ListingViewSet
from catalog.views.root import APIRootView

__all__ = ['APIRootView', 'BookViewSet', 'ListingViewSet']
