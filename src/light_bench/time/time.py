from time import (
    gmtime,
    strftime,
    time as time_sec,
)


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_iso8601(timestamp: float | None = None) -> str:
    """
    Format a Unix timestamp as an ISO 8601 UTC string with millisecond precision.

    Parameters
    ----------
    timestamp : float, optional
        Seconds since the epoch. Defaults to the current time.

    Returns
    -------
    str
        A string such as "2023-04-04T00:28:50.516Z".

    Example
    -------
    >>> time_iso8601(1672531200.25)
    '2023-01-01T00:00:00.250Z'
    """
    if timestamp is None:
        timestamp = time_sec()
    millis = int(timestamp * 1_000.0) % 1_000
    return strftime("%Y-%m-%dT%H:%M:%S", gmtime(int(timestamp))) + f".{millis:03d}Z"
