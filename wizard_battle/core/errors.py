"""Fatal error raised for malformed input."""

from .data.game_info import INVALID_INPUT_MESSAGE


class InvalidInputError(ValueError):
    """Malformed setup, malformed command or unknown player reference.

    Aborts the whole run; the report then consists of this single message.
    """

    def __init__(self, detail: str = ""):
        super().__init__(INVALID_INPUT_MESSAGE)
        self.detail = detail

    @property
    def message(self) -> str:
        return INVALID_INPUT_MESSAGE
