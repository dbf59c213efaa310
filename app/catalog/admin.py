# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Django admin registration for catalog models."""

from typing import ClassVar

from django.contrib import admin

from catalog.models import Book, Listing


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    list_display: ClassVar = ['id', 'title', 'author', 'published_date']
    search_fields: ClassVar = ['title', 'author']


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display: ClassVar = ['id', 'name', 'location', 'price', 'created_at']
    list_filter: ClassVar = ['location']
    search_fields: ClassVar = ['name', 'location', 'description']
