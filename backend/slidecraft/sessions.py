import logging
import uuid
from collections import OrderedDict

from fastapi import Request

from .config import settings
from .services.session import AppStateController

logger = logging.getLogger(__name__)

SESSION_KEY = "sid"


class SessionRegistry:
    """In-memory map of browser session id -> controller. Nothing is persisted."""

    def __init__(self, max_sessions: int):
        self.max_sessions = max_sessions
        self._controllers: "OrderedDict[str, AppStateController]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._controllers)

    def get_or_create(self, sid: str) -> AppStateController:
        controller = self._controllers.get(sid)
        if controller is None:
            controller = AppStateController()
            self._controllers[sid] = controller
            self._evict()
        else:
            self._controllers.move_to_end(sid)
        return controller

    def _evict(self) -> None:
        while len(self._controllers) > self.max_sessions:
            sid, controller = self._controllers.popitem(last=False)
            if controller.processing:
                # in-flight generations keep their slot
                self._controllers[sid] = controller
                break
            logger.info("Evicted idle session %s", sid[:8])

    def clear(self) -> None:
        self._controllers.clear()


registry = SessionRegistry(settings.MAX_SESSIONS)


def get_controller(request: Request) -> AppStateController:
    sid = request.session.get(SESSION_KEY)
    if not sid:
        sid = uuid.uuid4().hex
        request.session[SESSION_KEY] = sid
    return registry.get_or_create(sid)
