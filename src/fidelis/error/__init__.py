from fidelis import config, logger


DEBUG_APP_EXCEPTION = config.DEBUG_APP_EXCEPTION


class FidelisException(Exception):
    status_code = 500
    label = "Internal Error"
    errcode = "A00.000"

    def __init__(self, errcode, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.errcode = errcode

        DEBUG_APP_EXCEPTION and logger.exception(message)

    def __str__(self):
        if self.details is None:
            return f"{self.errcode} [{self.status_code}] >> {self.message}"

        return f"{self.errcode} [{self.status_code}] >> {self.message} >> {self.details}"

    @property
    def content(self):
        if not self.details:
            return {"errcode": self.errcode, "message": self.message}

        return {"errcode": self.errcode, "message": self.message, "details": self.details}


class BadRequestError(FidelisException):
    label = "Bad Request"
    status_code = 400
    errcode = "A00.400"


class NotFoundError(FidelisException):
    ''' The upstream service explicitly reported that it holds no record. '''
    label = "Not Found"
    status_code = 404
    errcode = "A00.404"


class UnprocessableError(FidelisException):
    label = "Unprocessable Entity"
    status_code = 422
    errcode = "A00.422"


class InputValidationError(BadRequestError):
    ''' Field-level input error. `details` maps field name => message. '''
    label = "Invalid Input"

    @property
    def field_errors(self):
        return dict(self.details or {})


class UpstreamError(FidelisException):
    ''' Base class of failures that trigger the next fallback tier. '''
    label = "Upstream Failure"
    status_code = 502
    errcode = "C00.502"


class TransportError(UpstreamError):
    label = "Transport Failure"


class MalformedResponseError(UpstreamError):
    label = "Malformed Response"
