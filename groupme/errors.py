class GroupMeError(ValueError):
    """Base class for failures talking to the GroupMe API."""


class TransportError(GroupMeError):
    """The request never produced a usable response (network, JSON or schema failure)."""


class RequestError(GroupMeError):
    """The server answered with a status code outside the accepted set."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url} returned {status_code}")
