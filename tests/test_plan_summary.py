from __future__ import annotations

import copy

from core.services.plan_parser import parse_plan_response
from core.services.plan_summary import summarize_plan

PLAN_TEXT = """
{
  "requestParameters": {},
  "debugOutput": {"routing": 12},
  "from": {"name": "A"},
  "to": {"name": "B"},
  "direct": [],
  "itineraries": [
    {"duration": 1800, "transfers": 1, "legs": [{"mode": "WALK"}, {"mode": "BUS"}]},
    {"legs": "not-a-list", "duration": true},
    "opaque"
  ],
  "customField": 1
}
"""


def test_summarize_plan_counts_itineraries_and_legs() -> None:
    plan = parse_plan_response(PLAN_TEXT)
    assert plan is not None

    summary = summarize_plan(plan)

    assert summary.itinerary_count == 3
    first, second, third = summary.itineraries
    assert (first.legs, first.duration, first.transfers) == (2, 1800, 1)
    assert (second.legs, second.duration) == (None, None)
    assert third.index == 2 and third.legs is None
    assert summary.has_debug_output is True
    assert summary.unknown_keys == ["customField"]
    assert summary.keys[0] == "requestParameters"


def test_summarize_plan_does_not_mutate_payload() -> None:
    plan = parse_plan_response(PLAN_TEXT)
    assert plan is not None
    before = copy.deepcopy(plan)

    summarize_plan(plan)

    assert plan == before


def test_summarize_empty_plan() -> None:
    plan = parse_plan_response('{"itineraries":[]}')
    assert plan is not None

    summary = summarize_plan(plan)

    assert summary.itinerary_count == 0
    assert summary.itineraries == []
    assert summary.has_debug_output is False
