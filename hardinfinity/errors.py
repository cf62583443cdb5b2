class CoreError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(CoreError):
    """Entity absent, or not owned by the caller."""

    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


class InvalidArgumentError(CoreError):
    status_code = 400


class ConflictError(CoreError):
    status_code = 409


class UnauthorizedError(CoreError):
    status_code = 401

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail)


class StorageFailure(CoreError):
    status_code = 500

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(detail)
