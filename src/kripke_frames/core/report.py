"""Human-readable reports for frame check results"""

import json

import yaml

from kripke_frames.core.errors import FrameCheckResult


def _to_human_view(result: FrameCheckResult) -> dict:
    """Reshape a result for reading rather than machine processing"""
    view = {
        "verdict": "pass" if result.valid else "fail",
        "properties": {name: ("holds" if holds else "fails") for name, holds in result.properties.items()},
        "systems": list(result.systems),
    }
    if result.required:
        view["required"] = list(result.required)
    if result.errors:
        view["errors"] = [f"[{e.code}] {e.message}" for e in result.errors]
    if result.warnings:
        view["warnings"] = [f"[{w.code}] {w.message}" for w in result.warnings]
    return view


def render_yaml(result: FrameCheckResult) -> str:
    """Render a result as a YAML summary"""
    return yaml.dump(_to_human_view(result), allow_unicode=True, default_flow_style=False, sort_keys=False)


def render_json(result: FrameCheckResult) -> str:
    """Render a result as JSON"""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


RENDERERS = {
    "json": render_json,
    "yaml": render_yaml,
}


def render(result: FrameCheckResult, report_format: str = "yaml") -> str:
    """Render a result in the given format ("json" or "yaml")"""
    if report_format not in RENDERERS:
        raise ValueError(f"Unknown report format '{report_format}' (expected one of: {', '.join(RENDERERS)})")
    return RENDERERS[report_format](result)
