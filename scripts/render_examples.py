#!/usr/bin/env python3
"""Build every documentation example and write its shapes to an SVG file."""

from __future__ import annotations

import importlib.util
import json
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
EXAMPLES_DIR = PROJECT_ROOT / "docs" / "examples"
DIST_DIR = PROJECT_ROOT / "dist" / "examples"
RESULTS_FILE = DIST_DIR / "results.json"


def load_build(path: Path):
    module_name = f"bezmorph_example_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to import example at {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    builder = getattr(module, "build", None)
    if builder is None or not callable(builder):
        raise AttributeError(f"{path} must define a callable build() function.")
    return builder


def run_case(path: Path) -> dict:
    from bezmorph._config import get_display_settings
    from bezmorph.modeling import Shape
    from bezmorph.svg import render_svg

    name = "-".join(path.relative_to(EXAMPLES_DIR).with_suffix("").parts)
    output = DIST_DIR / f"{name}.svg"
    try:
        scene = load_build(path)()
        shapes = [scene] if isinstance(scene, Shape) else list(scene)
        output.write_text(render_svg(shapes, settings=get_display_settings(), show_handles=True))
    except Exception:
        return {"name": name, "module": str(path.relative_to(PROJECT_ROOT)), "ok": False, "error": traceback.format_exc()}
    return {
        "name": name,
        "module": str(path.relative_to(PROJECT_ROOT)),
        "ok": True,
        "svg": str(output.relative_to(PROJECT_ROOT)),
    }


def main() -> int:
    DIST_DIR.mkdir(parents=True, exist_ok=True)
    results = [run_case(path) for path in sorted(EXAMPLES_DIR.rglob("*.py"))]
    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "cases": results,
    }
    RESULTS_FILE.write_text(json.dumps(payload, indent=2))
    failures = [case for case in results if not case["ok"]]
    for case in failures:
        print(f"[FAIL] {case['name']} ({case['module']})", file=sys.stderr)
    print(f"Wrote results to {RESULTS_FILE}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
