"""Game-level error conditions surfaced to players and the game loop."""


class Jump61Error(ValueError):
    """Base class; a failing call leaves the board as it was."""


class IllegalMove(Jump61Error):
    pass


class NothingToUndo(Jump61Error):
    pass


class PreconditionViolated(Jump61Error):
    pass
