"""Public REST entrypoint of the PagoPA proxy.

Routes translate simplified REST calls into PagoPA node operations and relay
node pushes, notification subscriptions and session or wallet reads to the app
backend.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from pagoproxy.common.backend_app import BackendAppClient, BackendAppError
from pagoproxy.common.config import settings
from pagoproxy.common.errors import ERROR_PAGOPA, HTTP_STATUS_BY_ERROR, ControllerError
from pagoproxy.common.logging import configure_logging, logger, trace_id_ctx
from pagoproxy.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from pagoproxy.common.result import Failure, Result
from pagoproxy.common.startup import log_startup_config
from pagoproxy.common.tracing import instrument_app, setup_tracing
from pagoproxy.services.account.service import AccountService
from pagoproxy.services.notifications.schemas import (
    NotificationSubscriptionBody,
    NotificationSubscriptionRequestType,
)
from pagoproxy.services.notifications.service import NotificationService
from pagoproxy.services.payments.client import PagoPaClient, PagoPaClientError
from pagoproxy.services.payments.pagopa_models import CdInfoWispInput, Esito
from pagoproxy.services.payments.schemas import (
    PaymentsActivationRequest,
    PaymentsActivationResponse,
    PaymentsCheckRequest,
    PaymentsCheckResponse,
)
from pagoproxy.services.payments.service import PaymentsService

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(
    settings,
    [
        "service_name",
        "port",
        "pagopa_url",
        "backend_app_url",
        "pagopa_identificativo_psp",
        "pagopa_identificativo_intermediario_psp",
        "pagopa_identificativo_canale",
        "pagopa_token",
    ],
)
app = FastAPI(title="PagoPA Proxy")
instrument_app(app)

backend_app_client = BackendAppClient()
payments_service = PaymentsService(
    settings.pagopa_config(),
    PagoPaClient(),
    backend_app_client,
    service_name=settings.service_name,
)
notification_service = NotificationService(backend_app_client)
account_service = AccountService(backend_app_client)


def get_payments_service() -> PaymentsService:
    return payments_service


def get_notification_service() -> NotificationService:
    return notification_service


def get_account_service() -> AccountService:
    return account_service


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Bind the trace id and record request count and latency."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    trace_id_ctx.set(request.headers.get("x-trace-id") or str(uuid4()))
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(_: Request, exc: RequestValidationError):
    logger.warning("invalid request errors=%s", exc.errors())
    return JSONResponse(status_code=400, content={"detail": ControllerError.ERROR_INVALID_INPUT.value})


@app.exception_handler(PagoPaClientError)
async def pagopa_error_handler(_: Request, exc: PagoPaClientError):
    return JSONResponse(status_code=502, content={"detail": ERROR_PAGOPA})


@app.exception_handler(BackendAppError)
async def backend_app_error_handler(_: Request, exc: BackendAppError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def _unwrap(result: Result):
    """Return the success value or raise the HTTP error for its classification."""

    if isinstance(result, Failure):
        raise HTTPException(status_code=HTTP_STATUS_BY_ERROR[result.error], detail=result.error.value)
    return result.value


@app.get("/payments/check", response_model=PaymentsCheckResponse, response_model_exclude_none=True)
async def check_payment(
    CF: str,
    AuxDigit: str,
    CodIUV: str,
    CodStazPA: str | None = None,
    service: PaymentsService = Depends(get_payments_service),
):
    """Verify a payment notice and open a new payment flow."""

    logger.info("Serving Payment Check Request (GET)...")
    codice_id_rpt = {"CF": CF, "AuxDigit": AuxDigit, "CodIUV": CodIUV}
    if CodStazPA is not None:
        codice_id_rpt["CodStazPA"] = CodStazPA
    try:
        request = PaymentsCheckRequest.model_validate({"codiceIdRPT": codice_id_rpt})
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=ControllerError.ERROR_INVALID_INPUT.value) from exc
    return _unwrap(await service.check(request))


@app.post(
    "/payments/activation",
    response_model=PaymentsActivationResponse,
    response_model_exclude_none=True,
)
async def activate_payment(
    req: PaymentsActivationRequest,
    service: PaymentsService = Depends(get_payments_service),
):
    """Activate a previously checked payment notice."""

    logger.info("Serving Payment Activation Request (POST)...")
    return _unwrap(await service.activate(req))


@app.post("/payments/status")
async def update_payment_status(
    request: Request,
    service: PaymentsService = Depends(get_payments_service),
):
    """Receive the node's payment-id push (cdInfoWisp).

    The node only reads `esito`, so every decode failure, including a body
    that is not a JSON object, is answered with `KO`.
    """

    logger.info("Serving Payment Status Update Request (POST)...")
    try:
        push = CdInfoWispInput.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("undecodable status push error=%s", exc)
        return JSONResponse(status_code=400, content={"esito": Esito.KO.value})
    result = await service.update_status(push)
    if isinstance(result, Failure):
        return JSONResponse(status_code=HTTP_STATUS_BY_ERROR[result.error], content={"esito": Esito.KO.value})
    return {"esito": Esito.OK.value}


@app.post("/notifications/activation")
async def activate_notifications(
    body: NotificationSubscriptionBody,
    service: NotificationService = Depends(get_notification_service),
):
    logger.info("Serving Notification Activation Request (POST)...")
    request = await service.update_subscription(body, NotificationSubscriptionRequestType.ACTIVATION)
    return request.model_dump(mode="json")


@app.post("/notifications/deactivation")
async def deactivate_notifications(
    body: NotificationSubscriptionBody,
    service: NotificationService = Depends(get_notification_service),
):
    logger.info("Serving Notification Deactivation Request (POST)...")
    request = await service.update_subscription(body, NotificationSubscriptionRequestType.DEACTIVATION)
    return request.model_dump(mode="json")


@app.get("/login")
async def login(request: Request, service: AccountService = Depends(get_account_service)):
    logger.info("Serving Login Request (GET)...")
    return await service.login(dict(request.query_params))


@app.get("/login-anonymous")
async def login_anonymous(request: Request, service: AccountService = Depends(get_account_service)):
    logger.info("Serving LoginAnonymous Request (GET)...")
    return await service.login_anonymous(dict(request.query_params))


@app.get("/wallet")
async def get_wallet(
    request: Request,
    authorization: str | None = Header(default=None),
    service: AccountService = Depends(get_account_service),
):
    logger.info("Serving Wallet Request (GET)...")
    return await service.get_wallet(dict(request.query_params), authorization)


@app.get("/transactions")
async def get_transactions(
    request: Request,
    authorization: str | None = Header(default=None),
    service: AccountService = Depends(get_account_service),
):
    logger.info("Serving Transactions Request (GET)...")
    return await service.get_transactions(dict(request.query_params), authorization)


@app.get("/transactions/{transaction_id}")
async def get_transaction(
    transaction_id: str,
    request: Request,
    authorization: str | None = Header(default=None),
    service: AccountService = Depends(get_account_service),
):
    logger.info("Serving Transaction Request (GET)...")
    return await service.get_transaction(transaction_id, dict(request.query_params), authorization)


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}


def run() -> None:
    """Serve the gateway with uvicorn on the configured port."""

    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
