# signalform/state_manager.py
from typing import Dict, List, Any, Optional

from .adapters.signalfx_adapter import SignalFxAdapter
from .config import API_VERSION
from .exceptions import RollbackError
from .models import ResourceState


class ResourceManager:
    """
    Tracks SignalFx resources by name and drives them to the declared payload.
    Resources are stored in creation order as: {name: {kind, state}}
    """
    def __init__(self, adapter: SignalFxAdapter):
        self._adapter = adapter
        self._resources: Dict[str, Dict[str, Any]] = {}

    def resource_url(self, kind: str, resource_id: Optional[str] = None) -> str:
        base = self._adapter.config["api_url"].rstrip("/")
        url = f"{base}/{API_VERSION}/{kind}"
        if resource_id:
            url = f"{url}/{resource_id}"
        return url

    def track(self, name: str, kind: str = "chart", state: Optional[ResourceState] = None) -> ResourceState:
        """Start tracking a resource, optionally from previously saved state"""
        if name not in self._resources:
            self._resources[name] = {
                "kind": kind,
                "state": state or ResourceState(name=name),
                "payload": None,
            }
        return self._resources[name]["state"]

    def apply(self, name: str, payload: Dict, kind: str = "chart") -> ResourceState:
        """
        Create the resource if it has no id. Otherwise read it back, recreate it
        if it was deleted upstream, and update it if it drifted or the payload
        differs from the one last applied.
        """
        state = self.track(name, kind)
        item = self._resources[name]
        kind = item["kind"]

        if state.exists:
            self._adapter.read(self.resource_url(kind, state.id), state)
            if state.exists and (not state.synced or payload != item["payload"]):
                self._adapter.update(self.resource_url(kind, state.id), payload, state)

        if not state.exists:
            self._adapter.create(self.resource_url(kind), payload, state)

        item["payload"] = payload
        return state

    def refresh(self, name: str) -> ResourceState:
        item = self._resources[name]
        state = item["state"]
        if state.exists:
            self._adapter.read(self.resource_url(item["kind"], state.id), state)
        return state

    def destroy(self, name: str) -> ResourceState:
        item = self._resources[name]
        state = item["state"]
        if state.exists:
            self._adapter.delete(self.resource_url(item["kind"], state.id), state)
        del self._resources[name]
        return state

    def rollback(self):
        """Delete every tracked resource in reverse creation order (LIFO)"""
        errors = []
        for name in reversed(list(self._resources)):
            try:
                self.destroy(name)
            except Exception as e:
                errors.append(f"Failed to delete {name}: {e}")

        if errors:
            raise RollbackError("Rollback incomplete:\n" + "\n".join(errors))

    def get_state(self, name: str) -> ResourceState:
        return self._resources[name]["state"]

    def get_resources(self, kind: Optional[str] = None) -> List[ResourceState]:
        """Get tracked resource states, optionally filtered by kind"""
        return [
            item["state"] for item in self._resources.values()
            if kind is None or item["kind"] == kind
        ]
