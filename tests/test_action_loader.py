import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from checkin_selector.actions import SelectByMultipleAttended
from checkin_selector.io.action_loader import load_action_objects, load_actions


def test_load_actions_valid(tmp_path):
    action_file = tmp_path / "workflow.yaml"
    action_file.write_text(
        """
- name: select_by_multiple_attended
  order: 3
  attributes:
    RoomBalanceByGroup: "true"
""",
        encoding="utf8",
    )
    actions = load_actions(str(action_file))
    assert len(actions) == 1
    action = actions[0]
    assert action.name == "select_by_multiple_attended"
    assert action.order == 3
    assert action.attributes == {"RoomBalanceByGroup": "true"}


def test_load_action_objects_defaults_order_to_position(tmp_path):
    action_file = tmp_path / "workflow.yaml"
    action_file.write_text(
        "- name: select_by_multiple_attended\n", encoding="utf8"
    )
    actions = load_action_objects(str(action_file))
    assert len(actions) == 1
    assert isinstance(actions[0], SelectByMultipleAttended)
    assert actions[0].order == 1
    assert actions[0].attributes == {}


@pytest.mark.parametrize(
    "content",
    [
        "name: not_a_list\n",
        "- just a string\n",
        "- order: 1\n",
        "- name: select_by_multiple_attended\n  order: first\n",
        "- name: select_by_multiple_attended\n  attributes: [1, 2]\n",
    ],
)
def test_load_actions_validation_errors(tmp_path, content):
    action_file = tmp_path / "bad_workflow.yaml"
    action_file.write_text(content, encoding="utf8")
    with pytest.raises(ValueError):
        load_actions(str(action_file))


def test_unknown_action_name(tmp_path):
    action_file = tmp_path / "workflow.yaml"
    action_file.write_text("- name: select_by_age\n", encoding="utf8")
    with pytest.raises(KeyError):
        load_action_objects(str(action_file))
