"""Errors raised by the skill extraction pipeline."""


class SkillExtractionError(Exception):
    """Base class for fatal extraction errors."""


class InvalidProfileUrl(SkillExtractionError):
    """The profile URL could not be parsed or does not point at the platform."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Invalid profile URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ProfileNotFound(SkillExtractionError):
    """The platform reports that the identifier does not exist."""

    def __init__(self, identifier: str):
        super().__init__(f"GitHub profile not found: {identifier}")
        self.identifier = identifier


class UpstreamUnavailable(SkillExtractionError):
    """Transport or HTTP failure on one of the mandatory profile/listing calls."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
