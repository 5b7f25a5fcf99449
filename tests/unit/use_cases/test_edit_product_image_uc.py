"""Tests for EditProductImageUseCase."""

import pytest

from lansky.application.use_cases.edit_product_image import (
    IMAGE_EDIT_OPERATION,
    EditProductImageUseCase,
)
from lansky.core.entities import ImagePayload
from lansky.core.exceptions import (
    FileTooLargeError,
    RequestInFlightError,
    UnsupportedFileTypeError,
)
from lansky.core.interfaces import ImageEditResponse

EDITED = ImagePayload(data=b"edited", mime_type="image/png")


@pytest.fixture
def use_case(mock_llm, guard):
    mock_llm.edit_image.return_value = ImageEditResponse(image=EDITED, model="image-model")
    return EditProductImageUseCase(llm=mock_llm, guard=guard)


class TestEditProductImageUseCase:
    async def test_edit(self, use_case, mock_llm):
        image = ImagePayload(data=b"photo", mime_type="image/jpeg")
        assert await use_case.execute(image, "brighten", filename="shoe.jpg") == EDITED
        mock_llm.edit_image.assert_awaited_once()

    async def test_unsupported_type(self, use_case, mock_llm):
        with pytest.raises(UnsupportedFileTypeError):
            await use_case.execute(ImagePayload(data=b"%PDF", mime_type="application/pdf"), "crop")
        mock_llm.edit_image.assert_not_awaited()

    async def test_too_large(self, use_case, monkeypatch):
        monkeypatch.setenv("API_MAX_UPLOAD_SIZE", "4")
        with pytest.raises(FileTooLargeError):
            await use_case.execute(ImagePayload(data=b"12345"), "crop")

    async def test_rejected_while_pending(self, use_case, guard):
        async with guard.hold(IMAGE_EDIT_OPERATION):
            with pytest.raises(RequestInFlightError):
                await use_case.execute(ImagePayload(data=b"photo"), "crop")
