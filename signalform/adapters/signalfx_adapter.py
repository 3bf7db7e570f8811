# signalform/adapters/signalfx_adapter.py
import json
import numbers
import logging
from typing import Dict, Any, Optional, Tuple

from ..config import DEFAULT_CONFIG, RESOURCE_NOT_FOUND
from ..exceptions import DecodeError, UpstreamError
from ..models import ResourceState
from .rest_adapter import RESTTransport

logger = logging.getLogger(__name__)

class SignalFxAdapter:
    """
    Create/read/update/delete of a SignalFx resource, keeping a ResourceState
    in step with what the API reports.
    """
    def __init__(self, transport: RESTTransport, config: Dict = None):
        self.transport = transport
        self.config = {**DEFAULT_CONFIG, **(config or {})}

    def _decode(self, state: ResourceState, body: bytes, action: str, with_id: bool = False) -> Tuple[Optional[str], float]:
        """
        Parse a success body into (id, lastUpdated).
        id is only required (and returned) when with_id is set.
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"Failed unmarshaling for the resource {state.name} during {action}: {e}") from e
        if not isinstance(data, dict):
            raise DecodeError(f"Unexpected response for the resource {state.name} during {action}: {data!r}")

        last_updated = data.get("lastUpdated")
        if isinstance(last_updated, bool) or not isinstance(last_updated, numbers.Real):
            raise DecodeError(
                f"Response for the resource {state.name} during {action} has no numeric lastUpdated: {last_updated!r}"
            )

        resource_id = None
        if with_id:
            resource_id = data.get("id")
            if not isinstance(resource_id, str) or not resource_id:
                raise DecodeError(
                    f"Response for the resource {state.name} during {action} has no id: {resource_id!r}"
                )
        return resource_id, float(last_updated)

    def create(self, url: str, payload: Any, state: ResourceState) -> ResourceState:
        """POST the payload; on success the state takes the new id and is synced"""
        status_code, body = self.transport.send("POST", url, payload)
        if status_code != 200:
            raise UpstreamError(state.name, status_code, body)

        resource_id, last_updated = self._decode(state, body, "creation", with_id=True)
        state.id = resource_id
        state.last_updated = last_updated
        state.synced = True
        logger.info("Created %s with id %s", state.name, state.id)
        return state

    def read(self, url: str, state: ResourceState) -> ResourceState:
        """
        GET the current resource. A lastUpdated later than ours (beyond the
        drift offset) means it was edited in the SignalFx UI: mark unsynced.
        A "Resource not found" answer means it was deleted: clear the id.
        """
        status_code, body = self.transport.send("GET", url)
        if status_code == 200:
            _, last_updated = self._decode(state, body, "read")
            if last_updated > state.last_updated + self.config["drift_offset"]:
                logger.info("%s was modified outside signalform", state.name)
                state.synced = False
                state.last_updated = last_updated
        elif body and RESOURCE_NOT_FOUND.encode() in body:
            logger.info("%s no longer exists in SignalFx", state.name)
            state.id = None
        else:
            raise UpstreamError(state.name, status_code, body)
        return state

    def update(self, url: str, payload: Any, state: ResourceState) -> ResourceState:
        status_code, body = self.transport.send("PUT", url, payload)
        if status_code != 200:
            raise UpstreamError(state.name, status_code, body)

        _, last_updated = self._decode(state, body, "update")
        state.synced = True
        state.last_updated = last_updated
        return state

    def delete(self, url: str, state: ResourceState) -> ResourceState:
        """Delete the resource; a 404 means it is already gone"""
        status_code, body = self.transport.send("DELETE", url)
        if status_code < 400 or status_code == 404:
            logger.info("Deleted %s", state.name)
            state.id = None
        else:
            raise UpstreamError(state.name, status_code, body)
        return state
