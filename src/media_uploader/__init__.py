"""Image upload component that previews a file and asks a remote model whether it is a deepfake."""

from .models import ModelChoice, PredictionResult, SelectedFile, Status, StatusKind
from .uploader import Uploader, UploaderState

__version__ = "0.1.0"

__all__ = [
    "ModelChoice",
    "PredictionResult",
    "SelectedFile",
    "Status",
    "StatusKind",
    "Uploader",
    "UploaderState",
    "__version__",
]
