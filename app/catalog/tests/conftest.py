# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Shared fixtures for the catalog tests."""

from __future__ import annotations

import datetime
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from catalog.models import Book, Listing


@pytest.fixture
def api_client() -> APIClient:
    """Return a DRF test client."""
    return APIClient()


@pytest.fixture
def book(db: None) -> Book:
    """Create a single book."""
    return Book.objects.create(
        title='Dune',
        author='Frank Herbert',
        description='Desert planet politics.',
        published_date=datetime.date(1965, 8, 1),
    )


@pytest.fixture
def listing(db: None) -> Listing:
    """Create a single listing."""
    return Listing.objects.create(
        name='Canal house',
        location='Amsterdam',
        description='Three floors with a view.',
        price=Decimal('1250.00'),
    )
