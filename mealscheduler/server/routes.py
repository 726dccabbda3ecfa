"""
JSON API for the booking calendar and selection controls.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pendulum
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pendulum import DateTime
from pydantic import BaseModel

from ..config import AppConfig
from ..domain import dates
from ..domain.models import Congregation, SelectOption
from ..domain.month_navigator import MonthNavigator
from ..selection import CongregationSelector, SelectionState, SelectView

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class CalendarViewResponse(BaseModel):
    start: str
    end: str


class BookingRangeResponse(BaseModel):
    date: str
    within_booking_range: bool
    is_future: bool
    is_past: bool


class PhoneResponse(BaseModel):
    formatted: str
    digits: str


class SelectCongregationRequest(BaseModel):
    congregation_id: str


class SelectedCongregationResponse(BaseModel):
    selected: Optional[Congregation] = None


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_selection(request: Request) -> SelectionState:
    return request.app.state.selection


def _parse_date(value: str, tz: str) -> DateTime:
    try:
        parsed = pendulum.parse(value, tz=tz)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid date: '{value}'") from exc

    if not isinstance(parsed, DateTime):
        raise HTTPException(status_code=422, detail=f"Invalid date: '{value}'")
    return parsed


@router.get("/time-options", response_model=List[SelectOption])
def time_options() -> List[SelectOption]:
    return dates.get_time_options()


@router.get("/time-label", response_model=SelectOption)
def time_label(time: str = Query(..., description="Time of day as HH:MM")) -> SelectOption:
    # InvalidTimeFormat is mapped to 422 by the application
    label = dates.format_time_from_24_to_12(time)
    value = dates.parse_time_string(time, now=dates.REFERENCE_DATE).format("HH:mm")
    return SelectOption(value=value, label=label)


@router.get("/calendar-view", response_model=CalendarViewResponse)
def calendar_view(
    anchor: Optional[str] = Query(None, description="Date inside the first month (YYYY-MM-DD)"),
    config: AppConfig = Depends(get_config),
) -> CalendarViewResponse:
    anchor_date = _parse_date(anchor, config.timezone) if anchor else pendulum.now(config.timezone)
    view = dates.get_calendar_view_dates(anchor_date)
    return CalendarViewResponse(start=view.start.isoformat(), end=view.end.isoformat())


@router.get("/months", response_model=List[SelectOption])
def months(
    count: int = Query(6, ge=1, le=24),
    config: AppConfig = Depends(get_config),
) -> List[SelectOption]:
    now = pendulum.now(config.timezone)
    return MonthNavigator(now).get_next_months(count, now=now)


@router.get("/booking-range", response_model=BookingRangeResponse)
def booking_range(
    date: str = Query(..., description="Date or datetime to check"),
    config: AppConfig = Depends(get_config),
) -> BookingRangeResponse:
    when = _parse_date(date, config.timezone)
    now = pendulum.now(config.timezone)
    return BookingRangeResponse(
        date=when.isoformat(),
        within_booking_range=dates.is_within_booking_range(when, now=now),
        is_future=dates.is_future_date(when, now=now),
        is_past=dates.is_past_date(when, now=now),
    )


@router.get("/phone", response_model=PhoneResponse)
def phone(number: str = Query(...)) -> PhoneResponse:
    return PhoneResponse(
        formatted=dates.format_phone_number(number),
        digits=dates.parse_phone_number(number),
    )


@router.get("/congregations", response_model=Optional[SelectView])
def congregations(selection: SelectionState = Depends(get_selection)) -> Optional[SelectView]:
    return CongregationSelector(selection).render()


@router.post("/congregations/selected", response_model=SelectedCongregationResponse)
def select_congregation(
    payload: SelectCongregationRequest,
    selection: SelectionState = Depends(get_selection),
) -> SelectedCongregationResponse:
    selected = CongregationSelector(selection).handle_change(payload.congregation_id)
    if selected is None:
        logger.info("Unknown congregation id %s, selection cleared", payload.congregation_id)
    return SelectedCongregationResponse(selected=selected)
