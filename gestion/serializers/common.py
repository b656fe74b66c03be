"""
Building blocks shared by the entity serializers.

JSON payloads use camelCase names while the models use snake_case
columns, so every serializer declares its fields explicitly with a
``source``.  The helpers below keep those declarations short.
"""
import html

import bleach
from rest_framework import serializers


def sanitize(value: str) -> str:
    """Strip markup; entities escaped by bleach are turned back into text."""
    return html.unescape(bleach.clean(value, tags=[], strip=True))


class CleanCharField(serializers.CharField):
    """CharField whose value is stripped of any markup before it is stored."""

    def to_internal_value(self, data):
        return sanitize(super().to_internal_value(data))


class ReferenceField(serializers.PrimaryKeyRelatedField):
    """Foreign key given by id.  An empty string counts as "no reference"."""

    def validate_empty_values(self, data):
        return super().validate_empty_values(None if data == '' else data)


def text(source=None, required=False, max_length=None, **kwargs):
    if source:
        kwargs['source'] = source
    if not required:
        kwargs.setdefault('allow_blank', True)
        kwargs.setdefault('allow_null', True)
    return CleanCharField(required=required, max_length=max_length, **kwargs)


def timestamp(source=None, required=False, **kwargs):
    if source:
        kwargs['source'] = source
    if not required:
        kwargs.setdefault('allow_null', True)
    return serializers.DateTimeField(required=required, **kwargs)


def reference(source, queryset, required=False, **kwargs):
    if not required:
        kwargs.setdefault('allow_null', True)
    return ReferenceField(source=source, queryset=queryset, required=required, **kwargs)


class RecordSerializer(serializers.ModelSerializer):
    """Base serializer: read-only id and timestamps, legacy key aliases.

    ``aliases`` maps payload keys still sent by older clients to the
    current field name.  When both are present the current name wins.
    """
    aliases: dict[str, str] = {}

    id = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    def to_internal_value(self, data):
        if self.aliases and hasattr(data, 'items'):
            data = dict(data.items())
            for legacy, name in self.aliases.items():
                if legacy in data:
                    value = data.pop(legacy)
                    data.setdefault(name, value)
        return super().to_internal_value(data)


RECORD_FIELDS = ('id', 'createdAt', 'updatedAt')
