class ExtractionError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(ExtractionError):
    pass


class MalformedResponseError(ExtractionError):
    pass


class UnexpectedShapeError(ExtractionError):
    pass


class ExtractionFailedError(ExtractionError):
    pass


class GeminiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")
