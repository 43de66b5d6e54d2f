"""Process-wide application state."""

from border_wait_times.adapters.state.app_state import AppState
from border_wait_times.adapters.state.log_broadcaster import LogStateBroadcaster
from border_wait_times.adapters.state.state_updater import StateUpdater

__all__ = ["AppState", "LogStateBroadcaster", "StateUpdater"]
