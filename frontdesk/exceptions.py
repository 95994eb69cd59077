from typing import Optional


class InvalidTransition(Exception):
    """Thrown when a status change is not allowed by the entity's transition table"""

    def __init__(
            self,
            entity: str,
            current: str,
            target: str,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"{entity} cannot move from '{current}' to '{target}'."
        super().__init__(message)
        self.entity = entity
        self.current = current
        self.target = target
