"""
Error kinds raised by the catalog loader and the ranking pipeline.

Every error here is recoverable from the caller's side:
- CatalogLoadError: the catalog could not be fetched (retry is allowed)
- CatalogDataError: the catalog arrived but is not a list of occupations
- ComputationError: scoring failed, results are reset to empty
"""


class OccupationMatchError(Exception):
    """Base class for all occupation-match errors."""


class CatalogLoadError(OccupationMatchError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogDataError(CatalogLoadError):
    pass


class ComputationError(OccupationMatchError):
    pass
