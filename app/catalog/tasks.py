# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Background tasks for the catalog, executed by Celery when enabled."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING

from celery import shared_task
from django.apps import apps
from django.conf import settings
from django.db import transaction
from kombu.exceptions import OperationalError

from catalog.models import Listing
from catalog.serializers import ListingSummarySerializer
from catalog.services import listing_summary

if TYPE_CHECKING:
    from celery import Task

logger = logging.getLogger(__name__)


@shared_task(name='catalog.notify_record_created')
def notify_record_created(model_label: str, pk: int) -> dict | None:
    """Announce a newly created record, None when it was removed in the meantime."""
    model = apps.get_model(model_label)

    try:
        instance = model.objects.get(pk=pk)
    except model.DoesNotExist:
        logger.warning('%s %s no longer exists, skipping notification', model_label, pk)
        return None

    logger.info('%s %s created: %s', model_label, pk, instance)
    return {'model': model_label, 'id': pk, 'label': str(instance)}


@shared_task(name='catalog.summarize_listings')
def summarize_listings() -> dict:
    """Compute and log the listing summary."""
    summary = dict(ListingSummarySerializer(listing_summary(Listing.objects.all())).data)

    logger.info(
        'Listing summary: %s listings, average price %s',
        summary['count'],
        summary['average_price'],
    )
    return summary


def dispatch(task: Task, *args: object) -> bool:
    """Send a task to the broker when Celery is enabled.

    Broker failures are logged and reported as False, the caller carries on.
    """
    if not settings.CELERY_ENABLED:
        return False

    try:
        task.delay(*args)
    except (OperationalError, OSError) as error:
        logger.warning('Failed to dispatch task %s: %s', task.name, error)
        return False

    return True


def dispatch_on_commit(task: Task, *args: object) -> None:
    """Dispatch a task once the current transaction has been committed."""
    transaction.on_commit(partial(dispatch, task, *args))
