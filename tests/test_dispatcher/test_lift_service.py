"""
Lift State Machine tests

Covers move / door-open / add-destination, direction bookkeeping and
lift filtering over the reference four-lift bank.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
from dispatcher import Lift, LiftAction, LiftFilterCriterion, LiftRegistry, LiftService
from dispatcher.core.direction import UP, DOWN, IDLE


@pytest.fixture
def service():
    registry = LiftRegistry([
        Lift(id=1, level=12),
        Lift(id=2, level=-1),
        Lift(id=3, level=5),
        Lift(id=4, level=17),
    ])
    return LiftService(registry)


def test_registry_lookup(service):
    assert service.get_lift(3).level == 5
    assert service.get_lift(99) is None
    assert [lift.id for lift in service.get_all_lifts()] == [1, 2, 3, 4]


def test_registry_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        LiftRegistry([Lift(id=1, level=1), Lift(id=1, level=2)])


def test_add_destination_above_goes_up(service):
    assert service.process_add_destination(3, 10)
    lift = service.get_lift(3)
    assert lift.destinations == [10]
    assert lift.direction == UP


def test_add_destination_below_goes_down(service):
    assert service.process_add_destination(3, 2)
    lift = service.get_lift(3)
    assert lift.destinations == [2]
    assert lift.direction == DOWN


def test_add_destination_uses_route_order(service):
    for level in (10, 18, 7, 14):
        service.process_add_destination(3, level)
    assert service.get_lift(3).destinations == [7, 10, 14, 18]


def test_door_open_on_last_stop_returns_to_idle(service):
    service.process_add_destination(3, 10)
    assert service.process_door_open(3, 10)
    lift = service.get_lift(3)
    assert lift.destinations == []
    assert lift.direction == IDLE


def test_door_open_recomputes_direction_from_next_stop(service):
    service.process_add_destination(3, 10)
    service.process_add_destination(3, 2)
    service.process_lift_movement(3, 10)
    service.process_door_open(3, 10)
    lift = service.get_lift(3)
    assert lift.destinations == [2]
    assert lift.direction == DOWN


def test_move_only_changes_level(service):
    service.process_add_destination(3, 10)
    assert service.process_lift_movement(3, 8)
    lift = service.get_lift(3)
    assert lift.level == 8
    assert lift.destinations == [10]
    assert lift.direction == UP


def test_direction_kept_while_parked_on_next_stop(service):
    service.process_add_destination(3, 10)
    service.process_add_destination(3, 14)
    service.process_lift_movement(3, 10)
    # Adding a stop while sitting on stop 10 must not flip the reported direction
    service.process_add_destination(3, 3)
    lift = service.get_lift(3)
    assert lift.destinations == [10, 14, 3]
    assert lift.direction == UP


@pytest.mark.parametrize("operation", [
    "process_lift_movement",
    "process_door_open",
    "process_add_destination",
])
def test_unknown_lift_returns_false(service, operation):
    before = [lift.to_dict() for lift in service.get_all_lifts()]
    assert getattr(service, operation)(42, 5) is False
    assert [lift.to_dict() for lift in service.get_all_lifts()] == before


def test_apply_action(service):
    lift = service.apply_action(1, LiftAction.from_dict({'type': 'add-destination', 'destination': 3}))
    assert lift.destinations == [3]
    assert lift.direction == DOWN

    lift = service.apply_action(1, LiftAction.from_dict({'type': 'lift-move', 'level': 3}))
    assert lift.level == 3

    lift = service.apply_action(1, LiftAction.from_dict({'type': 'door-open', 'level': 3}))
    assert lift.direction == IDLE


def test_apply_action_unknown_lift(service):
    assert service.apply_action(42, LiftAction(type='lift-move', level=3)) is None


def test_filter_inclusive_bounds(service):
    result = service.get_all_lifts_matching(LiftFilterCriterion(min_floor=-1, max_floor=12))
    assert [lift.level for lift in result] == [12, -1, 5]


def test_filter_min_floor_zero_excludes_basement(service):
    result = service.get_all_lifts_matching(LiftFilterCriterion(min_floor=0, max_floor=10))
    assert [lift.id for lift in result] == [3]


def test_filter_exact_floor(service):
    result = service.get_all_lifts_matching(LiftFilterCriterion(floor=17))
    assert [lift.id for lift in result] == [4]


def test_filter_direction(service):
    service.process_add_destination(2, 5)
    assert [lift.id for lift in service.get_all_lifts_matching(LiftFilterCriterion(direction=UP))] == [2]
    assert [lift.id for lift in service.get_all_lifts_matching(LiftFilterCriterion(direction=IDLE))] == [1, 3, 4]


def test_empty_filter_returns_everything(service):
    assert len(service.get_all_lifts_matching(LiftFilterCriterion())) == 4


def test_returned_lift_is_detached_from_registry(service):
    lift = service.get_lift(3)
    lift.destinations.append(0)
    lift.level = 99
    lift.direction = DOWN
    assert service.get_lift(3).to_dict() == {'id': 3, 'level': 5, 'direction': IDLE, 'destinations': []}

    listed = service.get_all_lifts()
    listed[0].destinations.append(4)
    matched = service.get_all_lifts_matching(LiftFilterCriterion(floor=12))
    matched[0].level = 1
    assert service.get_lift(1).to_dict() == {'id': 1, 'level': 12, 'direction': IDLE, 'destinations': []}


def test_earlier_snapshot_does_not_follow_later_changes(service):
    before = service.get_lift(3)
    service.process_add_destination(3, 10)
    assert before.destinations == []
    assert service.get_lift(3).destinations == [10]


def test_apply_action_returns_snapshot(service):
    result = service.apply_action(3, LiftAction(type='add-destination', destination=10))
    assert result.to_dict() == {'id': 3, 'level': 5, 'direction': UP, 'destinations': [10]}

    result.destinations.append(18)
    service.apply_action(3, LiftAction(type='lift-move', level=7))
    assert result.level == 5
    assert service.get_lift(3).destinations == [10]
