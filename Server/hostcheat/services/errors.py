"""
Game Errors

Request-level failures raised by the game service. Each error carries a
stable ``kind`` for clients and the HTTP status the API answers with.
"""


class GameError(Exception):
    """Base class for guess and session validation failures."""
    kind = "GameError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {'success': False, 'error': self.message, 'kind': self.kind}


class GameNotFoundError(GameError):
    kind = "NotFound"
    status_code = 404

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id


class GameAlreadyOverError(GameError):
    kind = "AlreadyOver"

    def __init__(self):
        super().__init__("Game is already over")


class InvalidGuessLengthError(GameError):
    kind = "InvalidLength"

    def __init__(self, expected: int):
        super().__init__(f"Guess must be exactly {expected} letters")
        self.expected = expected


class DuplicateGuessError(GameError):
    kind = "DuplicateGuess"

    def __init__(self, guess: str):
        super().__init__("Duplicate guess")
        self.guess = guess


class InvalidHardModeGuessError(GameError):
    kind = "InvalidHardModeGuess"

    def __init__(self):
        super().__init__("Invalid guess for hard mode")


class NotYourTurnError(GameError):
    kind = "NotYourTurn"

    def __init__(self, expected: int):
        super().__init__("Not your turn")
        self.expected = expected
