# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""ViewSet for managing books."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets

from catalog.models import Book
from catalog.schemas import ApiTags
from catalog.serializers import BookSerializer
from catalog.tasks import dispatch_on_commit, notify_record_created

if TYPE_CHECKING:
    from rest_framework.serializers import BaseSerializer

logger = logging.getLogger(__name__)


@extend_schema(tags=[ApiTags.BOOKS])
class BookViewSet(viewsets.ModelViewSet):
    """List, create, retrieve, update and delete books."""

    queryset = Book.objects.all()
    serializer_class = BookSerializer
    search_fields: ClassVar = ['title', 'author']
    ordering_fields: ClassVar = ['title', 'author', 'published_date']

    def perform_create(self, serializer: BaseSerializer) -> None:
        """Save the book and announce it in the background."""
        book = serializer.save()
        logger.info('Book %s created', book.pk)
        dispatch_on_commit(notify_record_created, 'catalog.Book', book.pk)

    def perform_destroy(self, instance: Book) -> None:
        logger.info('Book %s deleted', instance.pk)
        super().perform_destroy(instance)
