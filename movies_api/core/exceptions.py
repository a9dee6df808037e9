class MoviesApiError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class StoreError(MoviesApiError):
    """Raised by the repository when the database cannot serve a request:
    connection failures, driver errors and constraint violations."""
    pass
