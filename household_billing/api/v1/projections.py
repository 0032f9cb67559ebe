"""POST /v1/projections - monthly billing projection endpoint"""

import logging
import time
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from household_billing.api.dependencies import get_request_id, get_settings, get_today
from household_billing.api.v1.schemas import (
    FilterOptionsSchema,
    MonthlyProjectionSchema,
    ProjectionRequest,
    ProjectionResponse,
)
from household_billing.config import Settings
from household_billing.domain.exceptions import DomainException
from household_billing.domain.filters import filter_options, filter_purchases
from household_billing.domain.projection import project
from household_billing.domain.shares import split_shares
from household_billing.infrastructure.observability.logging import log_projection
from household_billing.infrastructure.observability.metrics import (
    projection_duration_histogram,
    record_projection,
    record_projection_failure,
)
from household_billing.utils.date_utils import YearMonth, default_horizon

router = APIRouter()


@router.post("/projections", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    today: date = Depends(get_today),
):
    """
    Project installments onto monthly statements.

    Flow:
    1. Convert the posted purchases and cards to domain objects
    2. Apply dashboard filters, if any
    3. Resolve the horizon (explicit months, or the default horizon around the anchor)
    4. Run the projector
    5. Split each month between self and others when a payer is given
    6. List the filter choices present in the posted purchases
    """
    start_time = time.time()
    request_id = get_request_id(request)

    purchases = [p.to_domain() for p in request_body.purchases]
    cards = [c.to_domain() for c in request_body.cards]
    # Choices come from the unfiltered set so a filter never hides its own alternatives
    options = filter_options(purchases)

    filters = request_body.filters
    if filters is not None:
        purchases = filter_purchases(
            purchases,
            location=filters.location,
            payer=filters.payer.to_domain() if filters.payer else None,
            card_reference=filters.card_reference,
        )

    if request_body.horizon is not None:
        horizon = [YearMonth.parse(month) for month in request_body.horizon]
    else:
        horizon = default_horizon(request_body.anchor or today, settings.horizon_months)

    strict = settings.strict_card_lookup if request_body.strict is None else request_body.strict

    try:
        with projection_duration_histogram.time():
            projections = project(
                purchases,
                cards,
                horizon,
                strict=strict,
                default_closing_day=settings.default_closing_day,
            )
    except DomainException as e:
        record_projection_failure(e)
        logging.warning(f"Projection rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    self_payer = request_body.self_payer.to_domain() if request_body.self_payer else None
    months = [
        MonthlyProjectionSchema.from_domain(
            projection,
            split_shares(projection, self_payer) if self_payer is not None else None,
        )
        for projection in projections
    ]

    duration = time.time() - start_time
    record_projection(len(purchases))
    log_projection(
        request_id,
        purchase_count=len(purchases),
        month_count=len(months),
        item_count=sum(len(m.items) for m in months),
        duration_ms=duration * 1000,
    )

    return ProjectionResponse(months=months, filter_options=FilterOptionsSchema.from_domain(options))
