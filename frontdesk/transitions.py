from typing import Optional

from frontdesk.exceptions import InvalidTransition


class TransitionTable:
    """
    Allowed status moves for one entity.

    ``transitions`` maps each status to the statuses reachable from it in
    one step; a status mapping to an empty tuple is terminal.
    ``messages`` optionally maps a target status to the error shown when
    the move is refused.
    """

    def __init__(self, entity: str, transitions: dict, messages: Optional[dict] = None):
        self.entity = entity
        self.transitions = {str(key): tuple(str(v) for v in value) for key, value in transitions.items()}
        self.messages = {str(key): value for key, value in (messages or {}).items()}

    def allows(self, current: str, target: str) -> bool:
        return target in self.transitions.get(current, ())

    def is_terminal(self, status: str) -> bool:
        return not self.transitions.get(status, ())

    def check(self, current: str, target: str) -> str:
        if target not in self.transitions:
            raise InvalidTransition(
                self.entity, current, target, message=f"Unknown {self.entity.lower()} status: {target}"
            )
        if not self.allows(current, target):
            raise InvalidTransition(
                self.entity, current, target, message=self.messages.get(target)
            )
        return target
