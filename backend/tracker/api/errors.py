"""HTTP conversions for service-layer errors."""

from fastapi import HTTPException

from tracker.services.intake import FormValidationError
from tracker.services.sorting import UnknownColumnError


def validation_failed(exc: FormValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": "Validation failed", "errors": exc.errors},
    )


def unknown_column(exc: UnknownColumnError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(exc))
