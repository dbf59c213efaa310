# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Queries shared by the listing endpoints and background tasks."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from django.db.models import Avg, Count, Max, Min

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from catalog.models import Listing

CENTS = Decimal('0.01')


def listing_summary(queryset: QuerySet[Listing]) -> dict:
    """Count the listings and collect price statistics and distinct locations.

    Prices are None when the queryset is empty.
    """
    stats = queryset.aggregate(
        count=Count('id'),
        average_price=Avg('price'),
        min_price=Min('price'),
        max_price=Max('price'),
    )

    average = stats['average_price']
    if average is not None:
        stats['average_price'] = Decimal(str(average)).quantize(CENTS, rounding=ROUND_HALF_UP)

    stats['locations'] = list(
        queryset.order_by('location').values_list('location', flat=True).distinct(),
    )
    return stats
