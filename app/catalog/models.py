# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Catalog models for books and listings."""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Book(models.Model):
    """A book with its author and publication date."""

    title = models.CharField(max_length=255)
    author = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    published_date = models.DateField()

    class Meta:
        ordering = ('id',)

    def __str__(self) -> str:
        """Return a string representation of the book."""
        return f'{self.title} by {self.author}'


class Listing(models.Model):
    """A priced listing at a location."""

    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-id')

    def __str__(self) -> str:
        """Return a string representation of the listing."""
        return f'{self.name} ({self.location})'
