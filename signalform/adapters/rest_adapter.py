# signalform/adapters/rest_adapter.py
import json
import logging
import requests
from typing import Dict, Optional, Tuple, Any

from ..config import DEFAULT_CONFIG
from ..exceptions import TransportError

logger = logging.getLogger(__name__)

class RESTTransport:
    """
    Sends one request per call to the SignalFx API with the auth token header.
    No retries; a failed attempt raises TransportError.
    """
    def __init__(self, token: str, config: Dict = None, session: Optional[requests.Session] = None):
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self.token = token
        self.session = session or requests.Session()

    def send(self, method: str, url: str, payload: Any = None, token: Optional[str] = None) -> Tuple[int, bytes]:
        """
        Issue the request and read the whole body.
        Returns: (status_code, body)
        """
        headers = {
            "Content-Type": "application/json",
            self.config["auth_header"]: token or self.token,
        }
        if payload is not None and not isinstance(payload, (bytes, str)):
            payload = json.dumps(payload)

        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                data=payload,
                headers=headers,
                timeout=self.config["timeout"],
                stream=True,
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed sending {method} request to SignalFx: {e}") from e

        try:
            body = resp.content
        except requests.RequestException as e:
            raise TransportError(
                f"Failed reading response body from {method} request: {e}",
                status_code=resp.status_code,
            ) from e
        finally:
            resp.close()

        logger.debug("%s %s -> %d", method, url, resp.status_code)
        return resp.status_code, body

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
