"""Shared HTTP plumbing for the backend REST services."""

import logging
import httpx
from flask import current_app

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """A backend call failed: transport error or non-success status."""
    
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ServiceClient:
    """JSON-over-HTTP client bound to a Flask app.
    
    Subclasses set ``url_config_key`` to the config entry holding the
    service base URL. The underlying ``httpx.Client`` is created in
    ``init_app`` and kept in ``app.extensions``.
    """
    name = 'service'
    url_config_key = None
    
    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)
    
    def init_app(self, app):
        client = httpx.Client(
            base_url=app.config[self.url_config_key],
            timeout=app.config.get('SERVICE_TIMEOUT', 10),
            transport=app.config.get('HTTP_TRANSPORT'),
            headers={'Accept': 'application/json'},
        )
        app.extensions[self.extension_key] = client
    
    @property
    def extension_key(self):
        return f'shophub.{self.name}'
    
    @property
    def client(self) -> httpx.Client:
        return current_app.extensions[self.extension_key]
    
    def _request(self, method: str, path: str, **kwargs):
        """Send a request and return the decoded JSON body (or ``None``)."""
        try:
            response = self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error('%s %s %s returned %s', self.name, method, path, status)
            message = exc.response.text or f'{self.name} returned {status}'
            raise ServiceError(message, status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.error('%s %s %s failed: %s', self.name, method, path, exc)
            raise ServiceError(f'{self.name} is unreachable') from exc
        
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ServiceError(f'{self.name} returned invalid JSON') from exc
    
    def get(self, path, **kwargs):
        return self._request('GET', path, **kwargs)
    
    def post(self, path, payload, **kwargs):
        return self._request('POST', path, json=payload, **kwargs)
    
    def put(self, path, payload, **kwargs):
        return self._request('PUT', path, json=payload, **kwargs)
    
    def delete(self, path, **kwargs):
        return self._request('DELETE', path, **kwargs)


def parse_records(data, factory, service_name):
    """Build model objects from a JSON list, rejecting malformed payloads."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ServiceError(f'{service_name} returned an unexpected payload')
    try:
        return [factory(item) for item in data]
    except (KeyError, TypeError, ValueError) as exc:
        logger.error('%s returned a malformed record: %s', service_name, exc)
        raise ServiceError(f'{service_name} returned a malformed record') from exc


def parse_record(data, factory, service_name):
    try:
        return factory(data)
    except (KeyError, TypeError, ValueError) as exc:
        logger.error('%s returned a malformed record: %s', service_name, exc)
        raise ServiceError(f'{service_name} returned a malformed record') from exc
