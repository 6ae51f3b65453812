"""Serializers for items and comments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Comment, Item


class ItemSerializer(serializers.ModelSerializer):
    """Краткое представление вещи, в том числе внутри бронирования."""

    available = serializers.BooleanField(source="is_available", read_only=True)
    requestId = serializers.IntegerField(source="request_id", read_only=True, allow_null=True)

    class Meta:
        model = Item
        fields = ["id", "name", "description", "available", "requestId"]
        read_only_fields = ["id", "name", "description"]


class ItemWriteSerializer(serializers.Serializer):
    """Создание и частичное обновление вещи."""

    # null is accepted so a partial update can leave a field unchanged
    name = serializers.CharField(max_length=255, allow_null=True)
    description = serializers.CharField(max_length=200, allow_null=True)
    available = serializers.BooleanField(allow_null=True)
    requestId = serializers.IntegerField(min_value=1, required=False, allow_null=True)

    def validate(self, attrs):  # type: ignore
        if not self.partial:
            missing = {
                field: ["This field may not be null."]
                for field in ("name", "description", "available")
                if attrs.get(field) is None
            }
            if missing:
                raise serializers.ValidationError(missing)
        return attrs

    def to_service_kwargs(self) -> dict:
        data = dict(self.validated_data)
        fields = {}
        if "name" in data:
            fields["name"] = data["name"]
        if "description" in data:
            fields["description"] = data["description"]
        if "available" in data:
            fields["is_available"] = data["available"]
        if data.get("requestId") is not None:
            fields["request_id"] = data["requestId"]
        return fields


class ItemBookingSerializer(serializers.Serializer):
    """Last or next booking shown to the item owner."""

    id = serializers.IntegerField(read_only=True)
    start = serializers.DateTimeField(read_only=True)
    end = serializers.DateTimeField(read_only=True)
    bookerId = serializers.IntegerField(source="booker_id", read_only=True)


class CommentSerializer(serializers.ModelSerializer):
    authorName = serializers.CharField(source="author.name", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "text", "authorName", "created"]
        read_only_fields = ["id", "authorName", "created"]


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(max_length=500)


class ItemDetailSerializer(ItemSerializer):
    """Вещь с последним и следующим бронированием и отзывами."""

    lastBooking = ItemBookingSerializer(source="last_booking", read_only=True, allow_null=True)
    nextBooking = ItemBookingSerializer(source="next_booking", read_only=True, allow_null=True)
    comments = CommentSerializer(source="comment_list", many=True, read_only=True)

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ["lastBooking", "nextBooking", "comments"]
