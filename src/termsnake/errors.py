class InputSourceError(RuntimeError):
    """The input channel failed; the game loop cannot make progress."""
