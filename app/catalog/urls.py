# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""URL configuration for the catalog API (Django Rest Framework)."""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from catalog.views import APIRootView, BookViewSet, ListingViewSet

router = DefaultRouter()
router.include_root_view = False
router.register('books', BookViewSet, basename='book')
router.register('listings', ListingViewSet, basename='listing')

urlpatterns = [
    path('', APIRootView.as_view(), name='api-root'),
    path('', include(router.urls)),
]
