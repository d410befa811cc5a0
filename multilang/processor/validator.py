from multilang.config.pipeline_config import PipelineConfig
from multilang.processor.exceptions import InvalidInputError
from multilang.processor.models import ProcessingRequest


def normalize_mime_type(mime_type: str) -> str:
    """Lower-case *mime_type* and drop parameters such as ``; charset=``."""
    return mime_type.split(";", 1)[0].strip().lower()


class InputValidator:
    """Rejects requests before any capability is called."""

    def __init__(self, config: PipelineConfig) -> None:
        self._max_size = config.max_file_size_bytes
        self._formats = config.supported_image_formats

    def validate(self, request: ProcessingRequest) -> None:
        """Check payload size and declared MIME type.

        Raises:
            InvalidInputError: if the payload is too large or the format is
                not a supported image type.
        """
        size = max(request.size_bytes, len(request.payload))
        if size > self._max_size:
            raise InvalidInputError(
                f"File {request.label} is {size} bytes, "
                f"maximum is {self._max_size} bytes"
            )
        if normalize_mime_type(request.mime_type) not in self._formats:
            raise InvalidInputError(
                f"Unsupported file type '{request.mime_type}'. "
                f"Supported: {sorted(self._formats)}"
            )

    def validate_text(self, text: str) -> None:
        """Raises InvalidInputError if *text* is empty or whitespace only."""
        if not text or not text.strip():
            raise InvalidInputError("No text provided for translation")
