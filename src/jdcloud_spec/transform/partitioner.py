"""Splits a spec into per-service and per-model documents."""

from jdcloud_spec.errors import PartitionError
from jdcloud_spec.spec.models import PathItem, Swagger
from jdcloud_spec.transform.refs import lower_first, up_first

SAVE_FILE_TAG = "x-jdcloud-save-file"
DEFAULT_BUCKET = "Default"


def _bucket_name(path: str, item: PathItem, file_tag: str) -> str:
    name = item.pop_extension(file_tag)
    if not isinstance(name, str) or not name:
        return DEFAULT_BUCKET
    # written as service/<name>.yaml
    if "/" in name or "\\" in name or name in (".", ".."):
        raise PartitionError(f"path '{path}' has invalid {file_tag} value '{name}'")
    return name


def group_paths(swagger: Swagger, file_tag: str = SAVE_FILE_TAG) -> dict[str, dict[str, PathItem]]:
    """Group paths by their file tag, removing the tag from each path item."""
    groups: dict[str, dict[str, PathItem]] = {}
    for path, item in (swagger.paths or {}).items():
        groups.setdefault(_bucket_name(path, item, file_tag), {})[path] = item
    return groups


def partition_paths(swagger: Swagger, file_tag: str = SAVE_FILE_TAG) -> dict[str, Swagger]:
    """One service document per bucket, sharing the root metadata.

    Definitions are left out; the model documents carry them.
    """
    services = {}
    for bucket, paths in group_paths(swagger, file_tag).items():
        services[bucket] = swagger.model_copy(
            update={"paths": paths, "definitions": None, "responses": None},
        )
    return services


def partition_models(swagger: Swagger) -> dict[str, Swagger]:
    """One document per definition, keyed by its output file stem."""
    models: dict[str, Swagger] = {}
    owners: dict[str, str] = {}
    for name, schema in (swagger.definitions or {}).items():
        stem = up_first(name)
        if stem in owners:
            raise PartitionError(f"definitions '{owners[stem]}' and '{name}' both map to model/{stem}.yaml")
        owners[stem] = name
        models[stem] = Swagger(swagger=swagger.swagger, definitions={lower_first(name): schema})
    return models
