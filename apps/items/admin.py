"""Admin registration for items and comments."""

from __future__ import annotations

from django.contrib import admin

from .models import Comment, Item


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ("author", "created")


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "is_available", "request")
    list_filter = ("is_available",)
    search_fields = ("name", "description", "owner__email")
    inlines = [CommentInline]
