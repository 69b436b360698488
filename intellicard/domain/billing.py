"""Statement cutoff rules - which invoice a purchase lands on"""

from datetime import date

from intellicard.utils.date_utils import add_months, clamped_date, month_start


def resolve_first_billing_month(origin_date: date, closing_day: int, due_day: int) -> date:
    """
    Find the statement month that first bills a purchase.

    Rules:
    - Purchases before the card's closing day bill on the same month's invoice
    - Purchases on or after the closing day roll to the next month's invoice
    - Day numbers past the end of a month are clamped (31 in February -> 28/29)

    Returns:
        Date in the billing month with day set to due_day (clamped). Only the
        year and month are meaningful; callers compare via month_start().

    Example:
        Card closes on the 5th, purchase on 2024-01-10 → 2024-02-<due_day>
        Card closes on the 5th, purchase on 2024-12-05 → 2025-01-<due_day>
    """
    closing_date = clamped_date(origin_date.year, origin_date.month, closing_day)

    billing_month = month_start(origin_date)
    if origin_date >= closing_date:
        billing_month = add_months(billing_month, 1)

    return clamped_date(billing_month.year, billing_month.month, due_day)
