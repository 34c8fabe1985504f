"""Tests for the media player and button entities."""

from unittest.mock import MagicMock

import pytest
from homeassistant.components.media_player import MediaPlayerState
from homeassistant.exceptions import HomeAssistantError

from custom_components.pioneer_avr.button import BUTTONS, PioneerButton
from custom_components.pioneer_avr.exceptions import TransportError
from custom_components.pioneer_avr.media_player import PioneerAVRMediaPlayer

from .conftest import HOST


@pytest.fixture
def player(client):
    player = PioneerAVRMediaPlayer(client, "Pioneer AVR", HOST, "entry1")
    player.async_write_ha_state = MagicMock()
    return player


@pytest.mark.asyncio
async def test_update_applies_status(player):
    await player.async_update()

    assert player.available
    assert player.state == MediaPlayerState.ON
    assert player.volume_level == pytest.approx(121 / 185)
    assert player.is_volume_muted is False
    assert player.source == "HDMI 2"
    assert player.extra_state_attributes == {
        "volume_raw": 121,
        "volume_db": pytest.approx(-20.0),
        "volume_display": "-20.0 dB",
        "input_code": 20,
    }


@pytest.mark.asyncio
async def test_update_unknown_input_code(player, transport):
    transport.status["Z"][0]["I"] = [44]
    await player.async_update()

    assert player.source == "Input 44"


@pytest.mark.asyncio
async def test_update_marks_unavailable_on_failure(player, transport):
    await player.async_update()
    transport.error = TransportError("Timeout")
    await player.async_update()

    assert not player.available


@pytest.mark.asyncio
async def test_volume_up_sends_one_step(player, transport):
    await player.async_volume_up()
    assert transport.commands == ["VU"]


@pytest.mark.asyncio
async def test_command_failure_raises_home_assistant_error(player, unreachable):
    with pytest.raises(HomeAssistantError):
        await player.async_volume_down()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("power", "token", "state"),
    [(1, "PF", MediaPlayerState.OFF), (0, "PO", MediaPlayerState.ON)],
)
async def test_toggle_power_polls_first(player, transport, power, token, state):
    transport.status["Z"][0]["P"] = power

    async def fetch(url, _fetch=transport.fetch):
        response = await _fetch(url)
        if "WebToHostItem=" in url:
            transport.status["Z"][0]["P"] = 1 - power
        return response

    transport.fetch = fetch
    await player.async_toggle()

    assert transport.commands == [token]
    assert transport.status_polls == 2
    assert player.state == state
    player.async_write_ha_state.assert_called_once()


@pytest.mark.asyncio
async def test_toggle_mute_service(player, transport):
    await player.async_toggle_mute()

    assert transport.commands == ["MO"]
    assert transport.status_polls == 2
    player.async_write_ha_state.assert_called_once()


@pytest.mark.asyncio
async def test_volume_step_services(player, transport):
    await player.async_volume_step_up(3)
    await player.async_volume_step_down(2)

    assert transport.commands == ["VU", "VU", "VU", "VD", "VD"]
    assert transport.status_polls == 2
    assert player.async_write_ha_state.call_count == 2


@pytest.mark.asyncio
async def test_volume_step_failure_raises_home_assistant_error(player, unreachable):
    with pytest.raises(HomeAssistantError):
        await player.async_volume_step_up(2)
    player.async_write_ha_state.assert_not_called()


@pytest.mark.asyncio
async def test_select_unknown_source(player, transport):
    with pytest.raises(HomeAssistantError):
        await player.async_select_source("Laserdisc")
    assert transport.urls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("key", "token"),
    [
        ("bass_up", "BI"),
        ("bass_down", "BD"),
        ("treble_up", "TI"),
        ("treble_down", "TD"),
        ("input_next", "FU"),
        ("input_prev", "FD"),
    ],
)
async def test_buttons(client, transport, key, token):
    description = next(d for d in BUTTONS if d.key == key)
    await PioneerButton(client, "entry1", description).async_press()
    assert transport.commands == [token]
