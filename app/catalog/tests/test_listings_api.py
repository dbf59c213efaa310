# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Tests for the listing endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import pytest
from rest_framework import status

from catalog.models import Listing

if TYPE_CHECKING:
    from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db

LISTINGS_URL = '/api/listings/'
SUMMARY_URL = '/api/listings/summary/'


def detail_url(pk: int) -> str:
    """Return the detail endpoint for a listing."""
    return f'{LISTINGS_URL}{pk}/'


@pytest.fixture
def listings(db: None) -> list[Listing]:
    """Create listings in two locations."""
    return [
        Listing.objects.create(name='Studio', location='Utrecht', price=Decimal('700.00')),
        Listing.objects.create(name='Houseboat', location='Amsterdam', price=Decimal('1500.00')),
        Listing.objects.create(name='Attic', location='Amsterdam', price=Decimal('500.50')),
    ]


# --------------------------------- CRUD TESTS ------------------------------------ #


class TestListingCrud:
    """Create, read, update and delete listings."""

    def test_create(self, api_client: APIClient) -> None:
        """A valid payload creates a listing with timestamps."""
        payload = {'name': 'Loft', 'location': 'Rotterdam', 'description': 'Open plan.', 'price': '950.00'}
        response = api_client.post(LISTINGS_URL, payload, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['price'] == '950.00'
        assert body['created_at']
        assert body['updated_at']
        assert Listing.objects.get().name == 'Loft'

    def test_create_negative_price(self, api_client: APIClient) -> None:
        """Negative prices are rejected with a field message."""
        payload = {'name': 'Loft', 'location': 'Rotterdam', 'price': '-1.00'}
        response = api_client.post(LISTINGS_URL, payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'price' in response.json()

    def test_create_too_many_decimals(self, api_client: APIClient) -> None:
        """Prices are limited to two decimal places."""
        payload = {'name': 'Loft', 'location': 'Rotterdam', 'price': '1.999'}
        response = api_client.post(LISTINGS_URL, payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'price' in response.json()

    def test_list_newest_first(self, api_client: APIClient, listings: list[Listing]) -> None:
        """Listings are listed newest first."""
        response = api_client.get(LISTINGS_URL)

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.json()] == [item.pk for item in reversed(listings)]

    def test_search_location(self, api_client: APIClient, listings: list[Listing]) -> None:
        """Search matches on location."""
        response = api_client.get(LISTINGS_URL, {'search': 'utrecht'})
        assert [item['name'] for item in response.json()] == ['Studio']

    def test_order_by_price(self, api_client: APIClient, listings: list[Listing]) -> None:
        """Ordering by ascending price."""
        response = api_client.get(LISTINGS_URL, {'ordering': 'price'})
        assert [item['name'] for item in response.json()] == ['Attic', 'Studio', 'Houseboat']

    def test_retrieve_missing(self, api_client: APIClient) -> None:
        """Unknown ids are not found."""
        assert api_client.get(detail_url(12345)).status_code == status.HTTP_404_NOT_FOUND

    def test_patch_price(self, api_client: APIClient, listing: Listing) -> None:
        """A partial update changes the price."""
        response = api_client.patch(detail_url(listing.pk), {'price': '1100.00'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        listing.refresh_from_db()
        assert listing.price == Decimal('1100.00')

    def test_put(self, api_client: APIClient, listing: Listing) -> None:
        """A full update keeps the creation timestamp."""
        created_at = listing.created_at
        payload = {'name': 'Canal house', 'location': 'Haarlem', 'description': '', 'price': '1000.00'}
        response = api_client.put(detail_url(listing.pk), payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        listing.refresh_from_db()
        assert listing.location == 'Haarlem'
        assert listing.created_at == created_at

    def test_delete(self, api_client: APIClient, listing: Listing) -> None:
        """Deleting removes the listing."""
        response = api_client.delete(detail_url(listing.pk))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Listing.objects.exists()


# -------------------------------- SUMMARY TESTS ---------------------------------- #


class TestListingSummary:
    """GET /api/listings/summary/."""

    def test_empty(self, api_client: APIClient) -> None:
        """No listings gives a zero count and null prices."""
        response = api_client.get(SUMMARY_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'count': 0,
            'average_price': None,
            'min_price': None,
            'max_price': None,
            'locations': [],
        }

    def test_statistics(self, api_client: APIClient, listings: list[Listing]) -> None:
        """Count, prices and distinct locations over every listing."""
        response = api_client.get(SUMMARY_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'count': 3,
            'average_price': '900.17',
            'min_price': '500.50',
            'max_price': '1500.00',
            'locations': ['Amsterdam', 'Utrecht'],
        }

    def test_respects_search(self, api_client: APIClient, listings: list[Listing]) -> None:
        """The summary covers only the searched listings."""
        response = api_client.get(SUMMARY_URL, {'search': 'amsterdam'})

        body = response.json()
        assert body['count'] == 2
        assert body['locations'] == ['Amsterdam']
        assert body['average_price'] == '1000.25'

    def test_post_not_allowed(self, api_client: APIClient) -> None:
        """The summary is read only."""
        assert api_client.post(SUMMARY_URL, {}, format='json').status_code == status.HTTP_405_METHOD_NOT_ALLOWED
