from collections.abc import Callable

import pytest
from PIL import Image

from filekit.files.models import InputFile
from tests.factories import image_bytes, make_noise_image, make_pdf


@pytest.fixture()
def csv_file() -> Callable[..., InputFile]:
    def _make(text: str, name: str = "contacts.csv", encoding: str = "utf-8") -> InputFile:
        return InputFile(name=name, data=text.encode(encoding))

    return _make


@pytest.fixture()
def two_page_pdf_bytes() -> bytes:
    return make_pdf(["Doc A page 1", "Doc A page 2"])


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    return make_pdf(["Doc B page 1", "Doc B page 2", "Doc B page 3"])


@pytest.fixture()
def noise_png_bytes() -> bytes:
    return image_bytes(make_noise_image(160, 120), "PNG")


@pytest.fixture()
def solid_png_bytes() -> bytes:
    return image_bytes(Image.new("RGB", (64, 48), (200, 30, 30)), "PNG")
