"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from wrapkit.contracts import WrapResult
from wrapkit.kernel.wrapper import WrapOptions


def generate_schemas():
    """Generate JSON schemas for the public models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    for filename, model in (
        ("wrap_options.schema.json", WrapOptions),
        ("wrap_result.schema.json", WrapResult),
    ):
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
