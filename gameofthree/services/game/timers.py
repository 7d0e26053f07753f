from typing import Callable, Set, Tuple

from gameofthree import socketio
from .session import Forfeit, SessionManager


_scheduled_turn_keys: Set[Tuple[int, int, int]] = set()


def schedule_turn_timer(app, manager: SessionManager, on_forfeit: Callable[[Forfeit], None]) -> None:
    """Arm a forfeit timer for the turn that is currently open.

    - No-ops when TURN_TIMEOUT_SEC is 0 or no session is active
    - Ensures a single timer per (manager, session generation, move count)
    - A timer whose turn has already been played, or whose session was
      discarded, fires without effect
    """
    duration = int(app.config.get('TURN_TIMEOUT_SEC', 0))
    if duration <= 0:
        return

    token = manager.turn_token()
    if token is None:
        return

    key = (id(manager),) + token
    if key in _scheduled_turn_keys:
        app.logger.debug(f"[timer-skip] generation={token[0]} moves={token[1]} already scheduled")
        return
    _scheduled_turn_keys.add(key)
    app.logger.info(f"[timer-set] generation={token[0]} moves={token[1]} duration={duration}s")

    def _worker(expected, delay: int):
        socketio.sleep(delay)
        with app.app_context():
            _scheduled_turn_keys.discard((id(manager),) + expected)
            forfeit = manager.expire_turn(expected)
            if forfeit is None:
                app.logger.debug(f"[timer-abort] generation={expected[0]} moves={expected[1]} turn already closed")
                return
            app.logger.info(f"[timer-fire] loser={int(forfeit.loser)} winner={int(forfeit.winner)}")
            on_forfeit(forfeit)

    socketio.start_background_task(_worker, token, duration)
