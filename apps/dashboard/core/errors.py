"""
Dashboard exceptions
"""


class BackendError(Exception):
    """Backend request failed: unreachable, non-2xx status or bad JSON"""

    def __init__(self, message, status_code=None, endpoint=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint

    def to_dict(self):
        data = {'error': self.message}
        if self.status_code is not None:
            data['status_code'] = self.status_code
        if self.endpoint:
            data['endpoint'] = self.endpoint
        return data


class ValidationError(ValueError):
    """Form input rejected before any request is made"""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field
