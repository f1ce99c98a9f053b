"""Notification subscription updates."""

from pagoproxy.common.backend_app import BackendAppClient
from pagoproxy.common.logging import logger
from pagoproxy.services.notifications.schemas import (
    NotificationSubscriptionBody,
    NotificationSubscriptionRequest,
    NotificationSubscriptionRequestType,
)


class NotificationService:
    """Forwards subscription activation/deactivation to the app backend."""

    def __init__(self, backend_app_client: BackendAppClient) -> None:
        self.backend_app_client = backend_app_client

    async def update_subscription(
        self,
        body: NotificationSubscriptionBody,
        request_type: NotificationSubscriptionRequestType,
    ) -> NotificationSubscriptionRequest:
        request = NotificationSubscriptionRequest(
            fiscalCode=body.fiscalCode,
            installationId=body.installationId,
            requestType=request_type,
        )
        await self.backend_app_client.post(
            "notification_subscription",
            "/notifications/subscriptions",
            request.model_dump(mode="json"),
        )
        logger.info(
            "notification subscription updated type=%s installation_id=%s",
            request_type.value,
            body.installationId,
        )
        return request
