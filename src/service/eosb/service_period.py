"""
Service Period Calculation for the EOSB Calculator.

Eligibility uses the exact elapsed day count, while the accrual tiers use a
calendar decomposition into whole years, months and days. The two are kept
side by side in a ServicePeriod.
"""

import calendar
from datetime import date

from .models import ServicePeriod


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month, accepting month 0 as December of the prior year.

    Args:
        year: Calendar year
        month: Month number (0-12)

    Returns:
        Days in that month (28-31)
    """
    if month < 1:
        year, month = year - 1, month + 12
    return calendar.monthrange(year, month)[1]


def calculate_service_period(joining_date: date, last_working_day: date) -> ServicePeriod:
    """
    Decompose the time between two dates into years, months and days.

    The decomposition borrows from the month preceding last_working_day's
    month when the day difference is negative, and from the year when the
    month difference is negative. It is not total_days / 365.

    Example:
        2020-01-31 -> 2021-02-15 gives 1 year, 0 months, 15 days
        (15 - 31 = -16, borrow January's 31 days).

    Args:
        joining_date: First day of service
        last_working_day: Last day of service

    Returns:
        ServicePeriod with total_days and the calendar decomposition
    """
    total_days = (last_working_day - joining_date).days

    years = last_working_day.year - joining_date.year
    months = last_working_day.month - joining_date.month
    days = last_working_day.day - joining_date.day

    if days < 0:
        months -= 1
        days += days_in_month(last_working_day.year, last_working_day.month - 1)

    if months < 0:
        years -= 1
        months += 12

    return ServicePeriod(
        total_days=total_days,
        years=years,
        months=months,
        days=days,
    )
