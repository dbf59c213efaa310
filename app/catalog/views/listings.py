# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""ViewSet for managing listings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from catalog.models import Listing
from catalog.schemas import LISTING_SUMMARY_SCHEMA, ApiTags
from catalog.serializers import ListingSerializer, ListingSummarySerializer
from catalog.services import listing_summary
from catalog.tasks import dispatch_on_commit, notify_record_created

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.serializers import BaseSerializer

logger = logging.getLogger(__name__)


@extend_schema(tags=[ApiTags.LISTINGS])
class ListingViewSet(viewsets.ModelViewSet):
    """List, create, retrieve, update and delete listings."""

    queryset = Listing.objects.all()
    serializer_class = ListingSerializer
    search_fields: ClassVar = ['name', 'location', 'description']
    ordering_fields: ClassVar = ['price', 'created_at', 'name']

    def perform_create(self, serializer: BaseSerializer) -> None:
        """Save the listing and announce it in the background."""
        listing = serializer.save()
        logger.info('Listing %s created', listing.pk)
        dispatch_on_commit(notify_record_created, 'catalog.Listing', listing.pk)

    def perform_destroy(self, instance: Listing) -> None:
        logger.info('Listing %s deleted', instance.pk)
        super().perform_destroy(instance)

    @LISTING_SUMMARY_SCHEMA
    @action(detail=False, methods=['get'])
    def summary(self, request: Request, **_kwargs: object) -> Response:
        """Return price statistics and locations over the (searched) listings."""
        queryset = self.filter_queryset(self.get_queryset())
        serializer = ListingSummarySerializer(listing_summary(queryset))
        return Response(serializer.data, status=status.HTTP_200_OK)
