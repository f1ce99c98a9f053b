"""User, wallet and transaction reads, relayed to the app backend."""

from typing import Any

from pagoproxy.common.backend_app import BackendAppClient


class AccountService:
    """Forwards session and wallet reads with the caller's credentials.

    This gateway owns no user state: query parameters and the `Authorization`
    header pass through untouched and the app backend's JSON comes back as is.
    """

    def __init__(self, backend_app_client: BackendAppClient) -> None:
        self.backend_app_client = backend_app_client

    async def _relay(self, kind: str, path: str, params: dict, authorization: str | None) -> Any:
        headers = {"Authorization": authorization} if authorization else {}
        return await self.backend_app_client.get(kind, path, params=params, headers=headers)

    async def login(self, params: dict) -> Any:
        return await self._relay("login", "/users/login", params, None)

    async def login_anonymous(self, params: dict) -> Any:
        return await self._relay("login_anonymous", "/users/login-anonymous", params, None)

    async def get_wallet(self, params: dict, authorization: str | None) -> Any:
        return await self._relay("wallet", "/wallet", params, authorization)

    async def get_transactions(self, params: dict, authorization: str | None) -> Any:
        return await self._relay("transactions", "/transactions", params, authorization)

    async def get_transaction(self, transaction_id: str, params: dict, authorization: str | None) -> Any:
        return await self._relay("transaction", f"/transactions/{transaction_id}", params, authorization)
