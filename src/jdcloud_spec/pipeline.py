"""Runs the transformation stages over a loaded spec."""

from pydantic import BaseModel, Field

from jdcloud_spec.spec.models import Swagger
from jdcloud_spec.transform.annotator import annotate
from jdcloud_spec.transform.partitioner import SAVE_FILE_TAG, partition_models, partition_paths
from jdcloud_spec.transform.resolver import resolve_responses


class TransformOptions(BaseModel):
    """Settings for one pipeline run."""

    module: str = ""  # x-jdcloud-module value, empty to skip
    file_tag: str = SAVE_FILE_TAG
    pretty: bool = True


class Documents(BaseModel):
    """Output of a run: service and model documents keyed by file stem."""

    services: dict[str, Swagger] = Field(default_factory=dict)
    models: dict[str, Swagger] = Field(default_factory=dict)
    unresolved: list[str] = Field(default_factory=list)


def run_pipeline(swagger: Swagger, options: TransformOptions | None = None) -> Documents:
    """Annotate, resolve and partition `swagger`. The input is modified in place."""
    options = options or TransformOptions()

    annotate(swagger, options.module)
    unresolved = resolve_responses(swagger)

    return Documents(
        services=partition_paths(swagger, options.file_tag),
        models=partition_models(swagger),
        unresolved=unresolved,
    )
