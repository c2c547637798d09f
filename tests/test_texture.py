import pytest

from orbitengine import renderer as render
from orbitengine.renderer import Renderer
from orbitengine.texture import Texture, TextureType


class FakeRenderer(Renderer):
    def __init__(self, texture_id):
        self.texture_id = texture_id
        self.loaded = []

    def draw(self):
        pass

    def create_buffer(self, submesh):
        return 1

    def draw_submesh(self, submesh, camera):
        return 1

    def load_texture_image(self, path):
        self.loaded.append(path)
        return self.texture_id

    def destroy(self):
        pass


@pytest.fixture(autouse=True)
def _clean_renderer():
    render.install(None)
    yield
    render.install(None)


def test_texture_loads_through_renderer():
    backend = FakeRenderer(7)
    render.install(backend)
    texture = Texture("wood.jpg")
    assert texture.texture_id == 7
    assert backend.loaded == ["wood.jpg"]
    assert texture.path == "wood.jpg"


def test_texture_defaults_to_diffuse():
    render.install(FakeRenderer(3))
    assert Texture("a.png").texture_type is TextureType.DIFFUSE


def test_texture_type_order():
    assert TextureType(0) is TextureType.DIFFUSE
    assert TextureType(1) is TextureType.METALLIC
    assert TextureType(2) is TextureType.ROUGHNESS
    assert TextureType(3) is TextureType.NORMAL
    assert TextureType(4) is TextureType.AO


def test_texture_without_renderer_raises():
    with pytest.raises(RuntimeError):
        Texture("missing.png")