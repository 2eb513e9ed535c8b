"""Serializers for parsing menu input and shaping menu output.

Input serializers only check the format of free-form text (integers, known
menu choices). Range rules belong to the domain.
"""

from enum import IntEnum

from rest_framework import serializers


class MenuChoice(IntEnum):
    """Options offered by the main menu."""

    EXIT = 0
    SHOW_SEATS = 1
    BUY_TICKET = 2
    STATISTICS = 3


class MenuChoiceSerializer(serializers.Serializer):
    """Serializer for a main menu selection."""

    choice = serializers.ChoiceField(choices=[choice.value for choice in MenuChoice])

    def validate_choice(self, value: int) -> MenuChoice:
        return MenuChoice(value)


class TheatreSizeSerializer(serializers.Serializer):
    """Serializer for the theatre dimensions."""

    rows = serializers.IntegerField()
    seats_per_row = serializers.IntegerField()


class SeatSelectionSerializer(serializers.Serializer):
    """Serializer for a ticket purchase request."""

    row = serializers.IntegerField()
    seat = serializers.IntegerField()


class StatisticsSerializer(serializers.Serializer):
    """Serializer for the Statistics domain value."""

    sold_count = serializers.IntegerField()
    sold_percentage = serializers.FloatField()
    current_income = serializers.IntegerField()
    possible_income = serializers.IntegerField()
