"""Error taxonomy for the subway line domain.

Every failure is a distinct, catchable condition. The boundary layer maps
them to user-facing responses via their ``code``.
"""


class SubwayError(Exception):
    """Base class for all subway domain and application errors."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidDistanceError(SubwayError):
    def __init__(self, message: str = "Distance must be a positive integer") -> None:
        super().__init__(message, code="INVALID_DISTANCE")


class InvalidSectionError(SubwayError):
    def __init__(self, message: str = "A section must connect two different stations") -> None:
        super().__init__(message, code="INVALID_SECTION")


class StationsNotConnectedError(SubwayError):
    def __init__(self, message: str = "Neither station is on the line") -> None:
        super().__init__(message, code="STATIONS_NOT_CONNECTED")


class SectionAlreadyExistsError(SubwayError):
    def __init__(self, message: str = "Both stations are already on the line") -> None:
        super().__init__(message, code="SECTION_ALREADY_EXISTS")


class DistanceExceedsOriginalError(SubwayError):
    def __init__(
        self, message: str = "New section must be shorter than the section it splits"
    ) -> None:
        super().__init__(message, code="DISTANCE_EXCEEDS_ORIGINAL")


class LastSectionError(SubwayError):
    def __init__(self, message: str = "The last section of a line cannot be removed") -> None:
        super().__init__(message, code="LAST_SECTION")


class StationNotOnLineError(SubwayError):
    def __init__(self, message: str = "Station is not on the line") -> None:
        super().__init__(message, code="STATION_NOT_ON_LINE")


class InvalidPathStateError(SubwayError):
    """The edge set no longer forms exactly one simple path.

    Never expected under correct mutation discipline; raised instead of
    returning a silently wrong path.
    """

    def __init__(self, message: str = "Sections do not form a single path") -> None:
        super().__init__(message, code="INVALID_PATH_STATE")


class LineNotFoundError(SubwayError):
    def __init__(self, message: str = "Line not found") -> None:
        super().__init__(message, code="LINE_NOT_FOUND")


class StationNotFoundError(SubwayError):
    def __init__(self, message: str = "Station not found") -> None:
        super().__init__(message, code="STATION_NOT_FOUND")
