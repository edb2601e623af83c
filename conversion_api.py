"""
Async client for the currency conversion service.

- POST /api/v1/convert       -> create_conversion
- GET  /api/v1/transactions  -> get_transactions (query: user_id)
- GET  /api/v1/users         -> get_users
- POST /api/v1/users         -> create_user

Bodies are passed through as-is and responses come back unchanged.
An empty body (e.g. 204) resolves to None; a non-JSON body resolves to its text.
HTTP errors and connection failures propagate as requests exceptions.
"""
import asyncio
import os

from api_client import APIClient

# ---------- CONFIG ----------
API_URL = os.environ.get("API_URL", "http://127.0.0.1:8000")

CONVERT_ENDPOINT = "/api/v1/convert"
TRANSACTIONS_ENDPOINT = "/api/v1/transactions"
USERS_ENDPOINT = "/api/v1/users"


class ConversionAPI:
    """Runs the blocking transport calls in a worker thread."""

    def __init__(self, client: APIClient):
        self.client = client

    async def create_conversion(self, user_id, from_currency, to_currency, amount):
        payload = {
            "user_id": user_id,
            "from_currency": from_currency,
            "to_currency": to_currency,
            "amount": amount,
        }
        return await asyncio.to_thread(self.client.post, CONVERT_ENDPOINT, json_payload=payload)

    async def get_transactions(self, user_id):
        return await asyncio.to_thread(
            self.client.get, TRANSACTIONS_ENDPOINT, params={"user_id": user_id}
        )

    async def get_users(self):
        return await asyncio.to_thread(self.client.get, USERS_ENDPOINT)

    async def create_user(self, name, email):
        payload = {"name": name, "email": email}
        return await asyncio.to_thread(self.client.post, USERS_ENDPOINT, json_payload=payload)


# shared transport, built once at import. Worker threads share its Session;
# calls only read its headers and the urllib3 pool is thread-safe.
api = APIClient(API_URL)
_default = ConversionAPI(api)


async def create_conversion(user_id, from_currency, to_currency, amount):
    return await _default.create_conversion(user_id, from_currency, to_currency, amount)


async def get_transactions(user_id):
    return await _default.get_transactions(user_id)


async def get_users():
    return await _default.get_users()


async def create_user(name, email):
    return await _default.create_user(name, email)
