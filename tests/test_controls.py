import pytest

pytest.importorskip("dearpygui.dearpygui")

from orrery.controls import toggle_label, toggle_status  # noqa: E402
from orrery.registry import ToggleResult, UnknownBodyError  # noqa: E402


def test_toggle_label_follows_registry_state(solar_registry):
    assert toggle_label(solar_registry, "Earth") == "Remove Earth"
    solar_registry.toggle("Earth")
    assert toggle_label(solar_registry, "Earth") == "Add Earth"
    solar_registry.remove("Earth")
    assert toggle_label(solar_registry, "Earth") == "Add Earth"
    solar_registry.toggle("Earth")
    assert toggle_label(solar_registry, "Earth") == "Remove Earth"


def test_toggle_label_unknown_body(solar_registry):
    with pytest.raises(UnknownBodyError):
        toggle_label(solar_registry, "Pluto")


@pytest.mark.parametrize("result, message, is_error", [
    (ToggleResult.ADDED, "Mars: added.", False),
    (ToggleResult.ACTIVATED, "Mars: activated.", False),
    (ToggleResult.DEACTIVATED, "Mars: deactivated.", False),
    (ToggleResult.BLOCKED, "Mars needs its primary to be active.", True),
    (ToggleResult.UNKNOWN_NAME, "Unknown body 'Mars'.", True),
])
def test_toggle_status_messages(result, message, is_error):
    assert toggle_status("Mars", result) == (message, is_error)


def test_labels_and_status_after_cascade(solar_registry):
    result = solar_registry.toggle("Earth")
    assert toggle_status("Earth", result) == ("Earth: deactivated.", False)
    assert toggle_label(solar_registry, "Earth") == "Add Earth"
    assert toggle_label(solar_registry, "Mars") == "Remove Mars"

    msg, is_error = toggle_status("Moon", solar_registry.toggle("Moon"))
    assert is_error
    assert msg == "Moon needs its primary to be active."

    msg, is_error = toggle_status("Pluto", solar_registry.toggle("Pluto"))
    assert (msg, is_error) == ("Unknown body 'Pluto'.", True)
