"""Serializes split documents to YAML files."""

from pathlib import Path

import yaml

from jdcloud_spec.errors import WriteError
from jdcloud_spec.pipeline import Documents
from jdcloud_spec.spec.models import Swagger
from jdcloud_spec.transform.refs import rewrite_refs

SERVICE_DIR = "service"
MODEL_DIR = "model"


def dump_document(doc: Swagger, pretty: bool = True) -> str:
    """Render one document as YAML with cross-file model references."""
    data = rewrite_refs(doc.to_dict(), f"../{MODEL_DIR}")
    return yaml.safe_dump(
        data,
        default_flow_style=not pretty,
        sort_keys=True,
        allow_unicode=True,
        width=80 if pretty else float("inf"),
    )


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"cannot write {path}: {e}") from e


def write_documents(documents: Documents, root: Path, pretty: bool = True) -> list[Path]:
    """Write `service/<bucket>.yaml` and `model/<Model>.yaml` under `root`.

    Files already written stay in place if a later write fails.
    """
    service_dir = Path(root) / SERVICE_DIR
    model_dir = Path(root) / MODEL_DIR
    try:
        service_dir.mkdir(parents=True, exist_ok=True)
        model_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"cannot create output directories under {root}: {e}") from e

    written = []
    for name, doc in documents.services.items():
        path = service_dir / f"{name}.yaml"
        _write(path, dump_document(doc, pretty))
        written.append(path)

    for name, doc in documents.models.items():
        path = model_dir / f"{name}.yaml"
        _write(path, dump_document(doc, pretty))
        written.append(path)

    return written
