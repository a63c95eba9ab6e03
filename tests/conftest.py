import pytest

from tests import plugins  # noqa: F401

from xmlscribe import DefaultRenderOptions, Document, NamespaceResolver


ROOT_NAMESPACES = {"https://example.com": "", "https://somesite.com": "ex"}


@pytest.fixture(autouse=True)
def _reset_render_options():
    DefaultRenderOptions.reset_defaults()


@pytest.fixture
def document():
    return Document()


@pytest.fixture
def plain_document():
    return Document().skip_prolog().no_indent()


@pytest.fixture
def resolver():
    return NamespaceResolver(ROOT_NAMESPACES)


@pytest.fixture
def sample_document():
    return (
        Document("UTF-8")
        .set_namespace("https://example.com")
        .add_namespace("https://somesite.com", "ex")
        .add(
            "library",
            lambda library: library.add(
                "book",
                lambda book: book.add_attribute("id", "1")
                .add("title", "Zazie dans le métro")
                .add("author", "Raymond Queneau"),
            ),
        )
    )
