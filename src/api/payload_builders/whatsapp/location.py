"""Builder para mensagens de localização."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.messages import LocationMessage


class LocationPayloadBuilder:
    """Builder para localização; name/address só quando informados."""

    def build(self, message: LocationMessage) -> dict[str, Any]:
        location: dict[str, Any] = {
            "latitude": message.latitude,
            "longitude": message.longitude,
        }
        if message.name is not None:
            location["name"] = message.name
        if message.address is not None:
            location["address"] = message.address
        return {"location": location}
