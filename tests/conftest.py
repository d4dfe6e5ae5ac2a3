import pytest

from esfilters import ElasticsearchFilters, ModelDescriptor


class Model:
    table = "myTable"

    sortable_fields = {
        "id": True,
        "value": True,
        "othervalue": {"type": "integer"},
    }


@pytest.fixture
def model() -> Model:
    return Model()


@pytest.fixture
def descriptor() -> ModelDescriptor:
    return ModelDescriptor.from_model(Model)


@pytest.fixture
def es_filters() -> ElasticsearchFilters:
    return ElasticsearchFilters()
