"""Notification subscription shapes relayed to the app backend."""

from enum import Enum

from pydantic import Field

from pagoproxy.services.payments.types import FiscalCode, FrozenModel


class NotificationSubscriptionRequestType(str, Enum):
    """Whether a subscription is being switched on or off."""

    ACTIVATION = "ACTIVATION"
    DEACTIVATION = "DEACTIVATION"


class NotificationSubscriptionBody(FrozenModel):
    """Body accepted by the notification endpoints."""

    fiscalCode: FiscalCode
    installationId: str = Field(min_length=1)


class NotificationSubscriptionRequest(NotificationSubscriptionBody):
    requestType: NotificationSubscriptionRequestType
