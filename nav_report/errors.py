class NavReportError(Exception):
    """Base error for the NAV report run."""


class NavFetchError(NavReportError):
    """Report could not be downloaded from AMFI."""


class MalformedReportError(NavReportError):
    """The downloaded text is not readable as semicolon delimited records."""

    def __init__(self, message, line_num=None):
        super().__init__(message)
        self.line_num = line_num
