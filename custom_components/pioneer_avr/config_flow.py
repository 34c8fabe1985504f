"""Config flow for Pioneer AVR integration."""
import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_HOST, CONF_PORT, CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResult
from homeassistant.helpers.aiohttp_client import async_get_clientsession
import homeassistant.helpers.config_validation as cv

from .const import DOMAIN, DEFAULT_PORT, DEFAULT_NAME
from .exceptions import MalformedResponse, TransportError
from .pioneer_client import PioneerClient
from .transport import AiohttpTransport

_LOGGER = logging.getLogger(__name__)


async def validate_input(hass: HomeAssistant, data: dict[str, Any]) -> dict[str, Any]:
    """Validate the user input allows us to reach the receiver."""
    host = data[CONF_HOST]
    port = data[CONF_PORT]

    client = PioneerClient(
        host, AiohttpTransport(async_get_clientsession(hass)), port=port
    )

    # One status poll proves the web interface answers with the expected shape
    await client.get_status()

    return {"title": data.get(CONF_NAME, f"Pioneer AVR {host}")}


class PioneerAVRConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Pioneer AVR."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step."""
        errors = {}

        if user_input is not None:
            # Check if already configured
            await self.async_set_unique_id(user_input[CONF_HOST])
            self._abort_if_unique_id_configured()

            try:
                info = await validate_input(self.hass, user_input)
            except TransportError as err:
                _LOGGER.error("Cannot connect to Pioneer AVR: %s", err)
                errors["base"] = "cannot_connect"
            except MalformedResponse as err:
                _LOGGER.error("Unexpected status from Pioneer AVR: %s", err)
                errors["base"] = "invalid_response"
            except Exception:  # pylint: disable=broad-except
                _LOGGER.exception("Unexpected exception")
                errors["base"] = "unknown"
            else:
                return self.async_create_entry(title=info["title"], data=user_input)

        data_schema = vol.Schema(
            {
                vol.Required(CONF_HOST): cv.string,
                vol.Optional(CONF_PORT, default=DEFAULT_PORT): cv.port,
                vol.Optional(CONF_NAME, default=DEFAULT_NAME): cv.string,
            }
        )

        return self.async_show_form(
            step_id="user", data_schema=data_schema, errors=errors
        )
