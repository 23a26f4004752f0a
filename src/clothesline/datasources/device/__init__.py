"""ESP32 drying-line controller.

Public API:
  - client: DeviceClient (switch_on, switch_off, switch, fetch_status)
"""

from clothesline.datasources.device.client import DeviceClient

__all__ = ["DeviceClient"]
