"""Product photo editing through the hosted image model."""

from lansky.config import get_logger
from lansky.core.entities.image import ImagePayload
from lansky.core.exceptions import ValidationError
from lansky.core.interfaces.llm import ILLMProvider

logger = get_logger(__name__)


class ImageEditorService:
    """Applies a free-text edit instruction to a product photo."""

    def __init__(self, llm: ILLMProvider):
        self._llm = llm

    async def edit(self, image: ImagePayload, instruction: str) -> ImagePayload | None:
        """
        Edit an image.

        Returns:
            The edited image, or None when the model produced no image

        Raises:
            ValidationError: on an empty image or instruction
            LLMError: on transport or provider failure
        """
        if not image.data:
            raise ValidationError("image", "Image is empty")
        if not instruction.strip():
            raise ValidationError("prompt", "Edit instruction is required")

        result = await self._llm.edit_image(image, instruction.strip())

        if result.image is None:
            logger.warning("image_edit_no_image", model=result.model)
            return None

        logger.info(
            "image_edit_completed",
            model=result.model,
            input_bytes=len(image.data),
            output_bytes=len(result.image.data),
            mime_type=result.image.mime_type,
        )
        return result.image
