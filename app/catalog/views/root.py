# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""API root view with documentation links."""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.views import APIView

from catalog.schemas import API_ROOT_SCHEMA

if TYPE_CHECKING:
    from rest_framework.request import Request


@API_ROOT_SCHEMA
class APIRootView(APIView):
    """Custom API root view that includes documentation links."""

    def get(self, request: Request, format_suffix: str | None = None) -> Response:
        """Return links to all available endpoints."""
        data = {
            'books': reverse('book-list', request=request, format=format_suffix),
            'listings': reverse('listing-list', request=request, format=format_suffix),
        }
        if settings.API_DOCS:
            data['swagger'] = reverse('swagger-ui', request=request, format=format_suffix)
            data['redoc'] = reverse('redoc', request=request, format=format_suffix)
            data['schema'] = reverse('schema', request=request, format=format_suffix)

        return Response(data)
