import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import photodoc
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from photodoc.core.models import SourceImage


# Common test fixtures
@pytest.fixture
def make_image():
    """Factory for geometry-only images (no pixel data)."""
    def _create(width: float, height: float, name: str = None) -> SourceImage:
        return SourceImage(width=width, height=height, name=name)
    return _create


@pytest.fixture
def pil_image():
    """Factory for decoded images backed by real pixels."""
    def _create(width: int = 200, height: int = 100, color: str = "white", name: str = None) -> SourceImage:
        return SourceImage.from_pil(Image.new("RGB", (width, height), color=color), name=name)
    return _create


@pytest.fixture
def image_files(tmp_path: Path):
    """Write three small image files and return their paths in order."""
    paths = []
    for name, size, color in (
        ("wide.png", (400, 200), "red"),
        ("tall.jpg", (150, 300), "green"),
        ("square.png", (250, 250), "blue"),
    ):
        path = tmp_path / name
        Image.new("RGB", size, color=color).save(path)
        paths.append(path)
    return paths
