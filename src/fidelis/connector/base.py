import httpx

from fidelis.error import MalformedResponseError, NotFoundError, TransportError

from . import config, logger


class ServiceConnector(object):
    ''' Base of the upstream service clients.

        `post_json` returns the decoded body or raises:
            - TransportError: network failure, timeout, non-2xx status
            - MalformedResponseError: HTML error page, non-JSON body, a body
              that is not an object or lacks the `success` flag
        `require_success` raises NotFoundError when the service answered
        properly but reported no record.
    '''

    def __init__(self, client: httpx.AsyncClient = None, store=None, base_url=None, timeout=None):
        self._client = client
        self._store = store
        self._base_url = base_url or config.SERVICE_BASE_URL
        self._timeout = timeout or config.REQUEST_TIMEOUT

    @property
    def store(self):
        return self._store

    def endpoint_url(self, endpoint):
        return f"{self._base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def _post(self, url, payload):
        if self._client is not None:
            return await self._client.post(url, json=payload, timeout=self._timeout)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(url, json=payload)

    async def post_json(self, endpoint, payload) -> dict:
        url = self.endpoint_url(endpoint)
        logger.debug('POST %s', url)

        try:
            response = await self._post(url, payload)
        except httpx.HTTPError as e:
            raise TransportError("C01.501", f"Request to [{url}] failed: {e!r}")

        return self.parse_response(url, response)

    def parse_response(self, url, response: httpx.Response) -> dict:
        if not response.is_success:
            raise TransportError("C01.502", f"Service [{url}] responded with status {response.status_code}")

        content_type = response.headers.get('content-type', '')
        if 'html' in content_type or response.text.lstrip().startswith('<'):
            raise MalformedResponseError("C01.503", f"Service [{url}] returned an HTML page")

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError("C01.504", f"Service [{url}] returned a non-JSON body: {e}")

        if not isinstance(body, dict):
            raise MalformedResponseError("C01.505", f"Service [{url}] returned a non-object body")

        if 'success' not in body:
            raise MalformedResponseError("C01.506", f"Service [{url}] response has no success flag")

        return body

    def require_success(self, body, message="No record found"):
        if not body.get('success'):
            raise NotFoundError("C01.404", message, body.get('message'))

        return body

    def require_data(self, body, url_hint):
        data = body.get('data')
        if not isinstance(data, dict):
            raise MalformedResponseError("C01.507", f"Service [{url_hint}] response has no data object")

        return data

    def cache_get(self, namespace, key):
        if self._store is None or not key:
            return None

        return self._store.get(namespace, key)

    def cache_put(self, namespace, key, value):
        if self._store is None or not key:
            return None

        return self._store.put(namespace, key, value)
