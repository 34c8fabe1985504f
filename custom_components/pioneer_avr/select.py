"""Select platform for Pioneer AVR sound settings.

The status poll does not report these settings, so each select shows the
last option chosen from Home Assistant (assumed state).
"""
from __future__ import annotations

import logging

from homeassistant.components.select import SelectEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.restore_state import RestoreEntity

from .commands import MODE_TABLES, SoundSetting
from .const import DOMAIN
from .exceptions import PioneerError
from .pioneer_client import PioneerClient

_LOGGER = logging.getLogger(__name__)

SETTING_NAMES = {
    SoundSetting.DIALOG_ENHANCEMENT: "Dialog enhancement",
    SoundSetting.PQLS: "PQLS",
    SoundSetting.EQ: "EQ",
    SoundSetting.STANDING_WAVE: "Standing wave",
    SoundSetting.PHASE_CONTROL: "Phase control",
    SoundSetting.TONE: "Tone",
    SoundSetting.AUTO_SOUND_RETRIEVER: "Auto sound retriever",
    SoundSetting.DIGITAL_NOISE_REDUCTION: "Digital noise reduction",
}


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Pioneer AVR sound setting selects."""
    client = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities(
        PioneerSoundSettingSelect(client, config_entry.entry_id, setting)
        for setting in SoundSetting
    )


class PioneerSoundSettingSelect(SelectEntity, RestoreEntity):
    """Select entity for one sound setting."""

    _attr_has_entity_name = True
    _attr_should_poll = False
    _attr_assumed_state = True
    _attr_icon = "mdi:tune-vertical"

    def __init__(
        self, client: PioneerClient, entry_id: str, setting: SoundSetting
    ) -> None:
        """Initialize the sound setting select."""
        self._client = client
        self._setting = setting
        self._attr_unique_id = f"{entry_id}_{setting.value}"
        self._attr_name = SETTING_NAMES[setting]
        self._attr_options = list(MODE_TABLES[setting].modes)
        self._attr_current_option = None
        self._attr_device_info = DeviceInfo(identifiers={(DOMAIN, entry_id)})

    async def async_added_to_hass(self) -> None:
        """Restore the last chosen option."""
        await super().async_added_to_hass()
        last_state = await self.async_get_last_state()
        if last_state is not None and last_state.state in self._attr_options:
            self._attr_current_option = last_state.state

    async def async_select_option(self, option: str) -> None:
        """Send the new mode to the receiver."""
        _LOGGER.debug("Setting %s to %s", self._setting.value, option)
        try:
            await self._client.set_mode(self._setting, option)
        except PioneerError as err:
            raise HomeAssistantError(
                f"Failed to set {self._attr_name} to {option}: {err}"
            ) from err
        self._attr_current_option = option
        self.async_write_ha_state()
