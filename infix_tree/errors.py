from __future__ import annotations


class ParseError(Exception):
    def __init__(self, message: str, *, position: int | None = None) -> None:
        self.position = position
        prefix = ""
        if position is not None:
            prefix = f"position {position}: "
        super().__init__(prefix + str(message))
