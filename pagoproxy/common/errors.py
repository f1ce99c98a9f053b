"""Classification codes shared by converters and controllers."""

from enum import Enum


class ControllerError(str, Enum):
    """Closed set of failure classifications returned by converters."""

    ERROR_INVALID_INPUT = "Invalid input. Please check request parameters"
    REQUEST_REJECTED = "Request rejected by PagoPA"
    ERROR_INTERNAL = "Internal error"


# HTTP edge only; converters never produce this one.
ERROR_PAGOPA = "Error calling PagoPA node"

HTTP_STATUS_BY_ERROR: dict[ControllerError, int] = {
    ControllerError.ERROR_INVALID_INPUT: 400,
    ControllerError.REQUEST_REJECTED: 422,
    ControllerError.ERROR_INTERNAL: 500,
}
