"""Edit Product Image Use Case: upload checks plus the image model call."""

from lansky.config import get_logger, get_settings
from lansky.core.entities import ImagePayload
from lansky.core.exceptions import FileTooLargeError, UnsupportedFileTypeError
from lansky.core.interfaces import ILLMProvider
from lansky.core.services.image_editor import ImageEditorService
from lansky.core.services.in_flight import InFlightGuard, get_in_flight_guard

logger = get_logger(__name__)

IMAGE_EDIT_OPERATION = "image_edit"


class EditProductImageUseCase:
    """Validate an uploaded product photo and apply an edit instruction."""

    def __init__(
        self,
        llm: ILLMProvider | None = None,
        guard: InFlightGuard | None = None,
    ):
        self._llm = llm
        self._guard = guard or get_in_flight_guard()

    def _get_llm(self) -> ILLMProvider:
        if self._llm is None:
            from lansky.infrastructure.llm import get_llm_provider

            self._llm = get_llm_provider()
        return self._llm

    @staticmethod
    def validate_upload(filename: str, image: ImagePayload) -> None:
        """
        Check size and MIME type against the API limits.

        Raises:
            FileTooLargeError: above ``API_MAX_UPLOAD_SIZE``
            UnsupportedFileTypeError: MIME type not in ``API_ALLOWED_IMAGE_TYPES``
        """
        api = get_settings().api
        if len(image.data) > api.max_upload_size:
            raise FileTooLargeError(filename, len(image.data), api.max_upload_size)
        if image.mime_type not in api.allowed_image_types:
            raise UnsupportedFileTypeError(filename, image.mime_type, api.allowed_image_types)

    async def execute(
        self,
        image: ImagePayload,
        prompt: str,
        filename: str = "image",
    ) -> ImagePayload | None:
        """
        Returns:
            The edited image, or None when the model produced none

        Raises:
            RequestInFlightError: if another edit is pending
            LLMError: on transport or provider failure
        """
        self.validate_upload(filename, image)

        async with self._guard.hold(IMAGE_EDIT_OPERATION):
            logger.info(
                "image_edit_requested",
                filename=filename,
                mime_type=image.mime_type,
                size=len(image.data),
            )
            return await ImageEditorService(self._get_llm()).edit(image, prompt)
