# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Serializers for the catalog API endpoints."""

from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from catalog.models import Book, Listing


class BookSerializer(serializers.ModelSerializer):
    """Expose every book field."""

    class Meta:
        model = Book
        fields = '__all__'
        read_only_fields: ClassVar = ['id']


class ListingSerializer(serializers.ModelSerializer):
    """Expose every listing field, timestamps are managed by the model."""

    class Meta:
        model = Listing
        fields = '__all__'
        read_only_fields: ClassVar = ['id', 'created_at', 'updated_at']


class ListingSummarySerializer(serializers.Serializer):
    """Aggregate statistics over a set of listings."""

    count = serializers.IntegerField()
    average_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    min_price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    max_price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    locations = serializers.ListField(child=serializers.CharField())
