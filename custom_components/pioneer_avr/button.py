"""Button platform for Pioneer AVR tone and input stepping."""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
import logging

from homeassistant.components.button import ButtonEntity, ButtonEntityDescription
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .exceptions import PioneerError
from .pioneer_client import PioneerClient

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PioneerButtonDescription(ButtonEntityDescription):
    """Button that sends one fixed command."""

    press_fn: Callable[[PioneerClient], Awaitable[None]]


BUTTONS: tuple[PioneerButtonDescription, ...] = (
    PioneerButtonDescription(
        key="bass_up", name="Bass up", icon="mdi:plus", press_fn=lambda c: c.bass_up()
    ),
    PioneerButtonDescription(
        key="bass_down", name="Bass down", icon="mdi:minus", press_fn=lambda c: c.bass_down()
    ),
    PioneerButtonDescription(
        key="treble_up", name="Treble up", icon="mdi:plus", press_fn=lambda c: c.treble_up()
    ),
    PioneerButtonDescription(
        key="treble_down",
        name="Treble down",
        icon="mdi:minus",
        press_fn=lambda c: c.treble_down(),
    ),
    PioneerButtonDescription(
        key="input_next",
        name="Next input",
        icon="mdi:skip-next",
        press_fn=lambda c: c.input_next(),
    ),
    PioneerButtonDescription(
        key="input_prev",
        name="Previous input",
        icon="mdi:skip-previous",
        press_fn=lambda c: c.input_prev(),
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Pioneer AVR buttons."""
    client = hass.data[DOMAIN][config_entry.entry_id]
    async_add_entities(
        PioneerButton(client, config_entry.entry_id, description)
        for description in BUTTONS
    )


class PioneerButton(ButtonEntity):
    """Sends a tone or input step command."""

    _attr_has_entity_name = True
    entity_description: PioneerButtonDescription

    def __init__(
        self,
        client: PioneerClient,
        entry_id: str,
        description: PioneerButtonDescription,
    ) -> None:
        self._client = client
        self.entity_description = description
        self._attr_unique_id = f"{entry_id}_{description.key}"
        self._attr_device_info = DeviceInfo(identifiers={(DOMAIN, entry_id)})

    async def async_press(self) -> None:
        """Send the command."""
        _LOGGER.debug("Button %s pressed", self.entity_description.key)
        try:
            await self.entity_description.press_fn(self._client)
        except PioneerError as err:
            raise HomeAssistantError(
                f"Failed to send {self.entity_description.key}: {err}"
            ) from err
