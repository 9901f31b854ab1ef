"""
Shopify HTTP transport

Two entry points share one error contract:
- rest_request: admin REST API, authenticated with the admin access token
- graphql_request: storefront GraphQL API, authenticated with the storefront token

Neither raises for remote problems. Timeouts, connection errors, non-2xx
statuses, GraphQL `errors` and undecodable bodies all come back as a failed
GatewayResult with a failure kind and a single error string.
"""

from typing import Any, Optional

import httpx
import orjson

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.gateway_result import GatewayFailureKind, GatewayResult


MAX_ERROR_BODY_LENGTH = 500


def extract_error_message(body: Any) -> str:
    """Shopify error bodies carry `errors` (string, list or field map) or `error`"""
    if isinstance(body, dict):
        errors = body.get('errors') or body.get('error')
        if errors:
            return errors if isinstance(errors, str) else orjson.dumps(errors).decode()
    if isinstance(body, str) and body:
        return body[:MAX_ERROR_BODY_LENGTH]
    return 'Request failed'


def _graphql_error_message(errors: Any) -> str:
    if isinstance(errors, list):
        messages = [
            error.get('message', '') if isinstance(error, dict) else str(error) for error in errors
        ]
        return '; '.join(message for message in messages if message) or 'GraphQL request failed'
    return extract_error_message({'errors': errors})


class ShopifyHttpClient:
    def __init__(
        self,
        *,
        store_url: str,
        api_version: str,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.store_url = store_url
        self.api_version = api_version
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f'https://{self.store_url}'

    def admin_url(self, path: str) -> str:
        # admin REST endpoints always carry the .json suffix, before any query string
        resource, _, query = path.partition('?')
        if not resource.endswith('.json'):
            resource = f'{resource}.json'
        url = f'{self.base_url}/admin/api/{self.api_version}/{resource}'
        return f'{url}?{query}' if query else url

    def storefront_url(self) -> str:
        return f'{self.base_url}/api/{self.api_version}/graphql.json'

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds,
            follow_redirects=False,
            transport=self._transport,
        )

    async def rest_request(
        self,
        method: str,
        path: str,
        *,
        access_token: str,
        payload: Optional[dict[str, Any]] = None,
    ) -> GatewayResult:
        headers = {
            'X-Shopify-Access-Token': access_token,
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        content = orjson.dumps(payload) if payload is not None else None
        url = self.admin_url(path)

        async with self._client() as client:
            response = await self._send(client, method, url, headers=headers, content=content)
            if isinstance(response, GatewayResult):
                return response

            if response.is_redirect or 300 <= response.status_code < 400:
                location = response.headers.get('location')
                if not location:
                    return GatewayResult.fail(
                        GatewayFailureKind.HTTP,
                        f'Redirect {response.status_code} without Location header',
                        status_code=response.status_code,
                    )
                redirect_url = str(httpx.URL(self.base_url).join(location))
                Logger.base.info(f'[Shopify] Redirect {response.status_code} to: {redirect_url}')
                response = await self._send(
                    client, method, redirect_url, headers=headers, content=content
                )
                if isinstance(response, GatewayResult):
                    return response
                if 300 <= response.status_code < 400:
                    return GatewayResult.fail(
                        GatewayFailureKind.HTTP,
                        f'Too many redirects ({response.status_code})',
                        status_code=response.status_code,
                    )

        return self._decode(response)

    async def graphql_request(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
        *,
        storefront_token: str,
    ) -> GatewayResult:
        headers = {
            'X-Shopify-Storefront-Access-Token': storefront_token,
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        content = orjson.dumps({'query': query, 'variables': variables or {}})

        async with self._client() as client:
            response = await self._send(
                client, 'POST', self.storefront_url(), headers=headers, content=content
            )
        if isinstance(response, GatewayResult):
            return response

        result = self._decode(response)
        if not result.success:
            return result

        body = result.data if isinstance(result.data, dict) else {}
        if body.get('errors'):
            return GatewayResult.fail(
                GatewayFailureKind.GRAPHQL,
                _graphql_error_message(body['errors']),
                status_code=response.status_code,
            )
        return GatewayResult.ok(body.get('data') or {}, status_code=response.status_code)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: Optional[bytes],
    ) -> httpx.Response | GatewayResult:
        try:
            return await client.request(method, url, headers=headers, content=content)
        except httpx.TimeoutException:
            return GatewayResult.fail(
                GatewayFailureKind.NETWORK,
                f'Request to Shopify timed out after {self.timeout_seconds}s',
            )
        except httpx.HTTPError as e:
            return GatewayResult.fail(GatewayFailureKind.NETWORK, str(e) or type(e).__name__)

    @staticmethod
    def _decode(response: httpx.Response) -> GatewayResult:
        status_code = response.status_code
        is_success = 200 <= status_code < 300
        raw = response.content

        if not raw.strip():
            if is_success:
                return GatewayResult.ok({}, status_code=status_code)
            return GatewayResult.fail(
                GatewayFailureKind.HTTP, 'Empty response', status_code=status_code
            )

        try:
            body = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            if not is_success:
                return GatewayResult.fail(
                    GatewayFailureKind.HTTP,
                    extract_error_message(response.text),
                    status_code=status_code,
                )
            return GatewayResult.fail(
                GatewayFailureKind.DECODE,
                f'Invalid JSON response: {e}',
                status_code=status_code,
            )

        if is_success:
            return GatewayResult.ok(body, status_code=status_code)
        return GatewayResult.fail(
            GatewayFailureKind.HTTP, extract_error_message(body), status_code=status_code
        )
