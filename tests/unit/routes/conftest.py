import pytest

from app.recommendation.selector import ImageSelector
from app.routes import images as image_routes
from tests.fakes import FakeRng


@pytest.fixture
def route_rng(app_instance):
    """
    Override get_image_selector() with a selector whose random source
    always picks the second pool image.
    """
    rng = FakeRng(index=1)
    selector = ImageSelector(rng=rng)  # type: ignore[arg-type]
    app_instance.dependency_overrides[image_routes.get_image_selector] = lambda: selector
    try:
        yield rng
    finally:
        app_instance.dependency_overrides.pop(image_routes.get_image_selector, None)
