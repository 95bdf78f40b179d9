from vm8.power_switch import PowerSwitch


def test_starts_off():
    assert PowerSwitch().is_on() is False


def test_turn_on_and_off():
    switch = PowerSwitch()
    switch.turn_on()
    assert switch.is_on() is True
    switch.turn_off()
    assert switch.is_on() is False


def test_turn_on_is_idempotent():
    switch = PowerSwitch()
    switch.turn_on()
    switch.turn_on()
    assert switch.is_on() is True


def test_toggle_flips_state():
    switch = PowerSwitch()
    states = []
    for _ in range(4):
        switch.toggle()
        states.append(switch.is_on())
    assert states == [True, False, True, False]