"""Ticket pricing rule.

Small theatres (fewer than LARGE_THEATRE_CAPACITY seats) charge a flat
FRONT_PRICE. Larger theatres charge FRONT_PRICE for the front half of the rows,
rounded down, and BACK_PRICE for the rest. The price depends only on the row.

The rule works on plain counts and does not apply the dimension bounds.
"""

FRONT_PRICE = 10
BACK_PRICE = 8
LARGE_THEATRE_CAPACITY = 60


def front_half(rows: int) -> int:
    """Return the number of rows sold at the front price in a large theatre."""
    return rows // 2


def ticket_price(rows: int, seats_per_row: int, row: int) -> int:
    if rows * seats_per_row < LARGE_THEATRE_CAPACITY:
        return FRONT_PRICE
    return FRONT_PRICE if row <= front_half(rows) else BACK_PRICE


def possible_income(rows: int, seats_per_row: int) -> int:
    """Return the income if every seat were sold."""
    return sum(
        ticket_price(rows, seats_per_row, row) * seats_per_row
        for row in range(1, rows + 1)
    )
