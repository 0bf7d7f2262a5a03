"""
Application exceptions
"""


class GarageBillingError(Exception):
    """Base class for errors raised by the billing core"""

    code = "GARAGE_BILLING_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PrintingUnavailable(GarageBillingError):
    """No print surface could be obtained; the caller may retry"""

    code = "PRINTING_UNAVAILABLE"

    def __init__(self, message: str = "Printing is unavailable. Please allow printing and try again."):
        super().__init__(message)
