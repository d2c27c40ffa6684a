"""
Errors and Error Codes
**********************

HWS has several possible Exceptions with corresponding error codes.

:class:`~hwslib.signer.Signer` functions and :mod:`~hwslib.commands` functions will generally raise an exception that is a subclass of :class:`HWSError`.
The HWS command line tool will convert these exceptions into a dictionary containing the error message and error code.
These look like ``{"error": "<msg>", "code": <code>}``.

Errors raised while talking to a device come in two kinds:

- :class:`DeviceConnectionError` when the connector could not establish a connection at all.
- :class:`DeviceError` (and its subclasses) when the device was reachable but a specific request failed.
"""

from typing import Any, Dict, Iterator, Optional
from contextlib import contextmanager

# Error codes
NO_CONNECTOR = -1 #: Connector was not specified
MISSING_ARGUMENTS = -2 #: Arguments are missing
DEVICE_CONN_ERROR = -3 #: Error connecting to the device
DEVICE_ERROR = -4 #: The device failed a request
BAD_ARGUMENT = -7 #: Bad, malformed, or conflicting argument was provided
DEVICE_LOCKED = -12 #: Device is locked or the application is not open
UNKNOWN_ERROR = -13 #: An unknown error occurred
ACTION_CANCELED = -14 #: Action was canceled by the user
UNSUPPORTED_REQUEST = -15 #: The device does not support the request
MALFORMED_RESPONSE = -16 #: The device returned data that could not be understood
HELP_TEXT = -17 #: Help text was requested by the user

# Exceptions
class HWSError(Exception):
    """
    Generic exception type produced by HWS
    Subclassed by specific Errors to have Exceptions that have specific error codes.

    Contains a message and error code.
    """
    def __init__(self, msg: str, code: int) -> None:
        """
        Create an exception with the message and error code

        :param msg: The error message
        :param code: The error code
        """
        Exception.__init__(self, msg)
        self.code = code
        self.msg = msg

    def get_code(self) -> int:
        """
        Get the error code for this Error

        :return: The error code
        """
        return self.code

    def get_msg(self) -> str:
        """
        Get the error message for this Error

        :return: The error message
        """
        return self.msg

    def __str__(self) -> str:
        return self.msg

class BadArgumentError(HWSError):
    """
    :class:`HWSError` for :data:`BAD_ARGUMENT`
    """
    def __init__(self, msg: str):
        """
        :param msg: The error message
        """
        HWSError.__init__(self, msg, BAD_ARGUMENT)

class DeviceConnectionError(HWSError):
    """
    :class:`HWSError` for :data:`DEVICE_CONN_ERROR`
    """
    def __init__(self, msg: str):
        """
        :param msg: The error message
        """
        HWSError.__init__(self, msg, DEVICE_CONN_ERROR)

class DeviceError(HWSError):
    """
    :class:`HWSError` for :data:`DEVICE_ERROR`

    Base class for failures of a single request to a reachable device.
    """
    def __init__(self, msg: str, code: int = DEVICE_ERROR):
        """
        :param msg: The error message
        :param code: The error code, overridden by subclasses
        """
        HWSError.__init__(self, msg, code)

class ActionCanceledError(DeviceError):
    """
    :class:`DeviceError` for :data:`ACTION_CANCELED`
    """
    def __init__(self, msg: str):
        DeviceError.__init__(self, msg, ACTION_CANCELED)

class DeviceLockedError(DeviceError):
    """
    :class:`DeviceError` for :data:`DEVICE_LOCKED`
    """
    def __init__(self, msg: str):
        DeviceError.__init__(self, msg, DEVICE_LOCKED)

class UnsupportedRequestError(DeviceError):
    """
    :class:`DeviceError` for :data:`UNSUPPORTED_REQUEST`
    """
    def __init__(self, msg: str):
        DeviceError.__init__(self, msg, UNSUPPORTED_REQUEST)

class MalformedResponseError(DeviceError):
    """
    :class:`DeviceError` for :data:`MALFORMED_RESPONSE`
    """
    def __init__(self, msg: str):
        DeviceError.__init__(self, msg, MALFORMED_RESPONSE)

class DeviceFailureError(DeviceError):
    """
    :class:`DeviceError` for :data:`UNKNOWN_ERROR`
    """
    def __init__(self, msg: str):
        DeviceError.__init__(self, msg, UNKNOWN_ERROR)

@contextmanager
def handle_errors(
    msg: Optional[str] = None,
    result: Optional[Dict[str, Any]] = None,
    code: int = UNKNOWN_ERROR,
    debug: bool = False,
) -> Iterator[None]:
    """
    Context manager to catch all Exceptions and HWSErrors to return them as dictionaries containing the error message and code.

    :param msg: Error message prefix. Attached to the beginning of each error message
    :param result: The dictionary to put the resulting error in
    :param code: The default error code to use for Exceptions
    :param debug: Whether to also print out the traceback for debugging purposes
    """
    if result is None:
        result = {}

    if msg is None:
        msg = ""
    else:
        msg = msg + " "

    try:
        yield

    except HWSError as e:
        result['error'] = msg + e.get_msg()
        result['code'] = e.get_code()
    except Exception as e:
        result['error'] = msg + str(e)
        result['code'] = code
        if debug:
            import traceback
            traceback.print_exc()
