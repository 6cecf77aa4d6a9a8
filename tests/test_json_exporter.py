from __future__ import annotations

from pathlib import Path

from adapters.json_exporter import export_plan_json
from core.services.plan_parser import parse_plan_response


def test_export_plan_json_keeps_key_order_and_unicode(tmp_path: Path) -> None:
    plan = parse_plan_response('{"to": {"name": "Zürich"}, "itineraries": []}')
    assert plan is not None

    path = export_plan_json(plan=plan, output_path=tmp_path / "nested" / "plan.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "Zürich" in text
    assert text.index('"to"') < text.index('"itineraries"')
    assert parse_plan_response(text) == plan


def test_export_plan_json_escapes_lone_surrogates(tmp_path: Path) -> None:
    plan = parse_plan_response('{"itineraries":["\\udc80"], "name": "Zürich"}')
    assert plan is not None

    path = export_plan_json(plan=plan, output_path=tmp_path / "plan.json")

    assert parse_plan_response(path.read_text(encoding="utf-8")) == plan
