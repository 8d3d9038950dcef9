class CatchMouseError(Exception):
    pass


class SpriteLoadError(CatchMouseError):
    """The mouse sprite could not be loaded; the game cannot start without it."""
