"""Exceptions raised by the Game of Life core."""


class LifeError(Exception):
    """Base class for all lifegrid errors."""


class SettingsError(LifeError, ValueError):
    """Settings file is malformed or has missing/invalid fields."""


class BoardFormatError(LifeError, ValueError):
    """Saved board text does not follow the board file format."""


class GeometryError(LifeError, ValueError):
    """Grid dimensions, cell size or live density are out of range."""
