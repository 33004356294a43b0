"""Domain layer: errors and schemas."""

from .errors import (
    EmptyResponseError,
    InvalidInputError,
    MissingCredentialError,
    ProductLensError,
    TransportError,
)
from .schemas import (
    AppState,
    Failure,
    Pending,
    Success,
    UploadedImage,
    ViewState,
)

__all__ = [
    "ProductLensError",
    "InvalidInputError",
    "MissingCredentialError",
    "EmptyResponseError",
    "TransportError",
    "AppState",
    "UploadedImage",
    "ViewState",
    "Pending",
    "Success",
    "Failure",
]
