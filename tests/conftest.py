import pytest

from section_builder import blocks, mixins, plugins, register_default_plugins, use


@pytest.fixture(autouse=True)
def clean_registries():
    """File de plugins et mixins globaux remis à l'état d'import entre chaque test."""
    plugins.reset()
    mixins.reset()
    register_default_plugins()
    yield
    plugins.reset()
    mixins.reset()


@pytest.fixture
def builder():
    """Builder avec les blocs fournis (header, hero, content, footer)."""
    from section_builder import Builder
    use(blocks.install)
    return Builder({"title": "Ma page", "landing": "ma-page"})
