"""
Car availability bookkeeping.

A car is either free or held by exactly one active booking. The flag is only
ever changed here, and taking it is a single conditional UPDATE so that two
requests racing for the same car cannot both win.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timedelta

from cars.models import Car
from core.exceptions import CarNotFound, CarUnavailable

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


def calculate_total_days(start: date | datetime, end: date | datetime) -> int:
    """Whole days between ``start`` and ``end``, rounding partial days up."""
    return math.ceil((end - start) / ONE_DAY)


def acquire(car_id) -> Car:
    """
    Mark the car as reserved and return its snapshot.

    Raises CarNotFound when the car does not exist and CarUnavailable when
    another booking already holds it.
    """
    updated = Car.objects.filter(pk=car_id, is_available=True).update(is_available=False)
    if not updated:
        if Car.objects.filter(pk=car_id).exists():
            logger.warning("Car %s is already reserved.", car_id)
            raise CarUnavailable()
        raise CarNotFound()

    try:
        car = Car.objects.get(pk=car_id)
    except Car.DoesNotExist:
        # Deleted between the flip and the read.
        raise CarNotFound()

    logger.info("Car %s reserved.", car_id)
    return car


def release(car_id) -> bool:
    """Mark the car as free again. Returns False if the car no longer exists."""
    updated = Car.objects.filter(pk=car_id).update(is_available=True)
    if not updated:
        logger.warning("Car %s no longer exists; nothing to release.", car_id)
        return False
    logger.info("Car %s released.", car_id)
    return True
