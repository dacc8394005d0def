"""Cargo itinerary to autopilot mission plan compiler.

Usage:
    from src.plan import compile_itinerary, parse_itinerary, render_plan

    itinerary = parse_itinerary(request_body)
    document = compile_itinerary(itinerary)
    plan_json = render_plan(document)

The compiler is pure: no I/O, no shared state, safe to call concurrently.
"""

from src.plan.compiler import (
    assign_jump_ids,
    compile_continuous,
    compile_hop,
    compile_itinerary,
    compile_winch,
)
from src.plan.document import (
    MissionPlanDocument,
    assemble_plan,
    parse_plan,
    plan_to_dict,
    render_plan,
)
from src.plan.geometry import Pose, VehicleCapability, requires_cruise_transition
from src.plan.itinerary import (
    ContinuousItinerary,
    HopItinerary,
    Itinerary,
    ItineraryKind,
    WinchItinerary,
    parse_itinerary,
)
from src.plan.items import MissionItem

__all__ = [
    "ContinuousItinerary",
    "HopItinerary",
    "Itinerary",
    "ItineraryKind",
    "MissionItem",
    "MissionPlanDocument",
    "Pose",
    "VehicleCapability",
    "WinchItinerary",
    "assemble_plan",
    "assign_jump_ids",
    "compile_continuous",
    "compile_hop",
    "compile_itinerary",
    "compile_winch",
    "parse_itinerary",
    "parse_plan",
    "plan_to_dict",
    "render_plan",
    "requires_cruise_transition",
]
