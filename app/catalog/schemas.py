# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""OpenAPI schema definitions for the catalog views."""

from drf_spectacular.utils import extend_schema
from rest_framework import serializers

from catalog.serializers import ListingSummarySerializer


class ApiTags:
    """API tag constants for Swagger/OpenAPI documentation grouping."""

    API = 'API'
    BOOKS = 'Books'
    LISTINGS = 'Listings'


class APIRootResponseSerializer(serializers.Serializer):
    """Response serializer for API root view."""

    books = serializers.URLField(help_text='URL to the books list endpoint')
    listings = serializers.URLField(help_text='URL to the listings list endpoint')
    swagger = serializers.URLField(
        required=False,
        help_text='URL to the Swagger UI (only available when docs are enabled)',
    )
    redoc = serializers.URLField(
        required=False,
        help_text='URL to the ReDoc documentation (only available when docs are enabled)',
    )
    schema = serializers.URLField(
        required=False,
        help_text='URL to the OpenAPI schema (only available when docs are enabled)',
    )


# Schema definitions for endpoints
API_ROOT_SCHEMA = extend_schema(
    tags=[ApiTags.API],
    responses={
        200: APIRootResponseSerializer,
    },
)

LISTING_SUMMARY_SCHEMA = extend_schema(
    methods=['get'],
    responses={
        200: ListingSummarySerializer,
    },
)
