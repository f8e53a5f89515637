class ScorecardError(Exception):
    """Base class for errors surfaced to the caller."""


class DocumentParseError(ScorecardError):
    pass


class NoQuestionsFoundError(ScorecardError):
    def __init__(self, message: str = "No questions found in the response sheet. "
                                      "The page format is probably not supported."):
        super().__init__(message)


class FetchError(ScorecardError):
    pass


class InvalidRequestError(ScorecardError):
    pass
