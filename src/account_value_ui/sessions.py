"""
Per-browser-session controller registry.

Each Reflex client token maps to the AppController that owns its Session.
The registry is bounded: when it is full, the least recently used session
is evicted. An evicted or replaced controller is no longer current, so
any view updates it still produces are dropped by the caller.
"""

from collections import OrderedDict

from account_value_ui import config
from account_value_ui.controller import AppController
from account_value_ui.lib import logs

LOG = logs.logger(__file__)


class SessionRegistry:
    """
    Bounded LRU mapping of client token to AppController.

    Attributes:
        max_sessions: Number of sessions kept before the oldest is evicted.
    """

    def __init__(self, max_sessions: int | None = None) -> None:
        self.max_sessions = max(1, max_sessions or config.MAX_SESSIONS)
        self._controllers: "OrderedDict[str, AppController]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._controllers)

    def get(self, token: str) -> AppController | None:
        """Return the session's controller and mark it recently used."""
        controller = self._controllers.get(token)
        if controller is not None:
            self._controllers.move_to_end(token)
        return controller

    def replace(self, token: str, controller: AppController) -> AppController:
        """Install a controller for the session, evicting the oldest if full."""
        self._controllers[token] = controller
        self._controllers.move_to_end(token)
        while len(self._controllers) > self.max_sessions:
            evicted, _ = self._controllers.popitem(last=False)
            LOG.info("Evicted idle session - token:%s", evicted)
        return controller

    def is_current(self, token: str, controller: AppController) -> bool:
        """True while this controller is still the one registered for the token."""
        return self._controllers.get(token) is controller
