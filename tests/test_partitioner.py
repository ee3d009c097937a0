from pathlib import Path

import pytest

from jdcloud_spec.errors import PartitionError
from jdcloud_spec.spec.loader import load_spec
from jdcloud_spec.spec.models import Swagger
from jdcloud_spec.transform.partitioner import DEFAULT_BUCKET, SAVE_FILE_TAG, partition_models, partition_paths

FIXTURES = Path(__file__).parent / "fixtures"


def _scenario() -> Swagger:
    return Swagger.model_validate({
        "swagger": "2.0",
        "host": "example.com",
        "paths": {
            "/a": {SAVE_FILE_TAG: "Group1", "get": {}},
            "/b": {"get": {}},
        },
        "definitions": {"Foo": {"type": "object"}, "Bar": {"type": "string"}},
    })


class TestPartitionPaths:
    def test_tagged_and_default_buckets(self):
        services = partition_paths(_scenario())
        assert set(services) == {"Group1", DEFAULT_BUCKET}
        assert list(services["Group1"].paths) == ["/a"]
        assert list(services[DEFAULT_BUCKET].paths) == ["/b"]

    def test_bucket_documents_share_root_metadata(self):
        services = partition_paths(_scenario())
        for doc in services.values():
            assert doc.swagger == "2.0"
            assert doc.to_dict()["host"] == "example.com"
            assert doc.definitions is None

    def test_file_tag_removed(self):
        services = partition_paths(_scenario())
        assert SAVE_FILE_TAG not in services["Group1"].paths["/a"].extensions

    def test_custom_file_tag(self):
        doc = Swagger.model_validate({"paths": {"/a": {"x-file": "Svc"}, "/b": {SAVE_FILE_TAG: "Other"}}})
        services = partition_paths(doc, "x-file")
        assert set(services) == {"Svc", DEFAULT_BUCKET}

    def test_non_string_tag_uses_default(self):
        doc = Swagger.model_validate({"paths": {"/a": {SAVE_FILE_TAG: 3}}})
        assert set(partition_paths(doc)) == {DEFAULT_BUCKET}

    def test_every_path_in_exactly_one_bucket(self):
        doc = load_spec(FIXTURES / "widgets.yaml")
        expected = set(doc.paths)
        services = partition_paths(doc)
        seen = [path for service in services.values() for path in service.paths]
        assert len(seen) == len(expected)
        assert set(seen) == expected

    def test_no_paths(self):
        assert partition_paths(Swagger()) == {}

    @pytest.mark.parametrize("tag", ["../../escape", "compute/instance", "..", "a\\b"])
    def test_bucket_name_must_be_a_file_name(self, tag):
        doc = Swagger.model_validate({"paths": {"/a": {SAVE_FILE_TAG: tag}}})
        with pytest.raises(PartitionError, match="/a"):
            partition_paths(doc)


class TestPartitionModels:
    def test_one_document_per_definition(self):
        models = partition_models(_scenario())
        assert set(models) == {"Foo", "Bar"}
        assert list(models["Foo"].definitions) == ["foo"]
        assert list(models["Bar"].definitions) == ["bar"]

    def test_model_document_has_only_version_and_definition(self):
        models = partition_models(_scenario())
        assert models["Foo"].to_dict() == {"swagger": "2.0", "definitions": {"foo": {"type": "object"}}}

    def test_lowercase_definition_gets_capitalized_file(self):
        doc = load_spec(FIXTURES / "widgets.yaml")
        models = partition_models(doc)
        assert set(models) == {"Widget", "WidgetSpec", "Tag"}
        assert list(models["Tag"].definitions) == ["tag"]

    def test_colliding_file_names_rejected(self):
        doc = Swagger.model_validate({"definitions": {"foo": {}, "Foo": {}}})
        with pytest.raises(PartitionError):
            partition_models(doc)
