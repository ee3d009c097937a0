"""Cross-file `$ref` rewriting for split model documents."""

DEFINITIONS_PREFIX = "#/definitions/"
MODEL_DIR = "../model"


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def up_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def model_ref(name: str, model_dir: str = MODEL_DIR) -> str:
    """Reference to the `name` definition in its own model file."""
    return f"{model_dir}/{up_first(name)}.yaml{DEFINITIONS_PREFIX}{lower_first(name)}"


def rewrite_ref(ref: str, model_dir: str = MODEL_DIR) -> str:
    """Point a local `#/definitions/...` reference at the model's file.

    Any other reference is returned unchanged.
    """
    if not ref.startswith(DEFINITIONS_PREFIX):
        return ref
    name, sep, rest = ref[len(DEFINITIONS_PREFIX):].partition("/")
    if not name:
        return ref
    return model_ref(name, model_dir) + sep + rest


def rewrite_refs(node, model_dir: str = MODEL_DIR):
    """Return a copy of a dumped document with every `$ref` rewritten."""
    if isinstance(node, dict):
        rewritten = {}
        for key, value in node.items():
            if key == "$ref" and isinstance(value, str):
                rewritten[key] = rewrite_ref(value, model_dir)
            else:
                rewritten[key] = rewrite_refs(value, model_dir)
        return rewritten
    if isinstance(node, list):
        return [rewrite_refs(item, model_dir) for item in node]
    return node
